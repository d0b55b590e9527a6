"""
Deterministic HTML renderer for pitch deck content.

Takes a ``PitchDeckContent`` instance and produces a self-contained HTML
presentation (the free tier's standard export) with:
- a cover section, one section per slide, and a market-insights section
- keyboard navigation (Arrow keys / Space)
- progress dots and a slide counter
"""

from __future__ import annotations

import html as html_mod

from protolab.schemas.deck_content import PitchDeckContent, PitchSlide, insight_sections


def _e(text: str | None) -> str:
    """HTML-escape helper."""
    return html_mod.escape(text or "")


def _render_cover(title: str, executive_summary: str | None) -> str:
    summary = f'<p class="cover-summary">{_e(executive_summary)}</p>' if executive_summary else ""
    return f"""
    <section class="slide slide-cover" data-slide="0">
      <div class="slide-content">
        <h1 class="cover-title">{_e(title)}</h1>
        <p class="cover-subtitle">AI-Generated Pitch Deck</p>
        {summary}
        <div class="cover-prompt">Press &rarr; to begin</div>
      </div>
    </section>"""


def _render_slide(slide: PitchSlide, index: int, total: int) -> str:
    points = "\n".join(f"<li>{_e(p)}</li>" for p in slide.content)

    key_points = ""
    if slide.key_points:
        items = "".join(f'<span class="key-point">{_e(k)}</span>' for k in slide.key_points)
        key_points = f'<div class="key-points"><h3>Key Insights</h3>{items}</div>'

    return f"""
    <section class="slide" data-slide="{index}">
      <div class="slide-content">
        <span class="slide-number">{slide.slide_number}/{total}</span>
        <h2 class="slide-headline">{_e(slide.title)}</h2>
        <ul class="slide-points">{points}</ul>
        {key_points}
      </div>
    </section>"""


def _render_insights(content: PitchDeckContent, index: int) -> str:
    blocks = "".join(
        f'<div class="insight"><h3>{_e(heading)}</h3><p>{_e(body)}</p></div>'
        for heading, body in insight_sections(content.insights)
    )
    return f"""
    <section class="slide slide-insights" data-slide="{index}">
      <div class="slide-content">
        <h2 class="slide-headline">Market Insights &amp; Analysis</h2>
        <div class="insight-grid">{blocks}</div>
      </div>
    </section>"""


def render_pitch_deck_html(content: PitchDeckContent) -> str:
    """Render a PitchDeckContent into a self-contained HTML presentation."""

    total = len(content.slides)
    sections = [_render_cover(content.title, content.executive_summary)]
    sections.extend(_render_slide(slide, i, total) for i, slide in enumerate(content.slides, start=1))
    sections.append(_render_insights(content, total + 1))

    total_sections = len(sections)
    dots = "".join(
        f'<span class="dot{" active" if i == 0 else ""}" data-dot="{i}"></span>'
        for i in range(total_sections)
    )

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{_e(content.title)} - ProtoLab</title>
<style>
*, *::before, *::after {{ box-sizing: border-box; margin: 0; padding: 0; }}

html, body {{
  width: 100%; height: 100%; overflow: hidden;
  font-family: Helvetica, Arial, sans-serif;
  background: #f8fafc; color: #333;
}}

/* --- Slide system --- */
.deck {{ position: relative; width: 100vw; height: 100vh; overflow: hidden; }}

.slide {{
  position: absolute; inset: 0;
  display: flex; align-items: center; justify-content: center;
  opacity: 0;
  transform: translateY(30px);
  transition: opacity 0.5s ease, transform 0.5s ease;
  pointer-events: none;
}}
.slide.active {{ opacity: 1; transform: translateY(0); pointer-events: auto; }}

.slide-content {{
  position: relative;
  width: min(90vw, 900px);
  padding: clamp(24px, 4vw, 56px);
  background: #fff;
  border-top: 8px solid #2563eb;
  border-radius: 12px;
  box-shadow: 0 8px 32px rgba(15,23,42,0.12);
}}

/* --- Cover --- */
.slide-cover .slide-content {{ background: #2563eb; color: #fff; }}
.cover-title {{ font-size: clamp(32px, 5vw, 64px); font-weight: 800; }}
.cover-subtitle {{ margin-top: 16px; font-size: clamp(16px, 2vw, 24px); opacity: 0.85; }}
.cover-summary {{ margin-top: 24px; font-size: clamp(13px, 1.4vw, 17px); line-height: 1.5; opacity: 0.85; }}
.cover-prompt {{
  margin-top: 40px;
  font-size: 12px; font-weight: 600;
  text-transform: uppercase; letter-spacing: 0.15em;
  opacity: 0.6;
}}

/* --- Content slides --- */
.slide-number {{ position: absolute; top: 20px; right: 28px; font-size: 13px; color: #64748b; }}
.slide-headline {{ font-size: clamp(24px, 3.5vw, 44px); font-weight: 700; color: #2563eb; margin-bottom: 24px; }}
.slide-points {{ list-style: disc; padding-left: 24px; display: flex; flex-direction: column; gap: 12px; }}
.slide-points li {{ font-size: clamp(14px, 1.5vw, 19px); line-height: 1.4; }}
.key-points {{ margin-top: 28px; }}
.key-points h3 {{ font-size: 16px; color: #2563eb; margin-bottom: 10px; }}
.key-point {{
  display: inline-block;
  margin: 0 8px 8px 0; padding: 6px 12px;
  background: #eff6ff; border-radius: 999px;
  font-size: 13px; color: #1e40af;
}}

/* --- Insights --- */
.insight-grid {{ display: grid; grid-template-columns: 1fr 1fr; gap: 20px; }}
.insight h3 {{ font-size: 16px; color: #2563eb; margin-bottom: 6px; }}
.insight p {{ font-size: 14px; line-height: 1.5; }}

/* --- Progress dots --- */
.progress {{
  position: fixed; bottom: 24px; left: 50%; transform: translateX(-50%);
  display: flex; gap: 8px; z-index: 100;
}}
.dot {{ width: 8px; height: 8px; border-radius: 50%; background: #cbd5e1; cursor: pointer; }}
.dot.active {{ background: #2563eb; transform: scale(1.3); }}

.slide-counter {{
  position: fixed; top: 20px; left: 24px;
  font-size: 12px; font-weight: 600; color: #94a3b8;
  z-index: 100;
}}
</style>
</head>
<body>
<div class="deck">
  {"".join(sections)}
</div>

<div class="progress">{dots}</div>
<div class="slide-counter"><span id="current">1</span> / {total_sections}</div>

<script>
(function() {{
  const TOTAL = {total_sections};
  let current = 0;
  const slides = document.querySelectorAll('.slide');
  const dots = document.querySelectorAll('.dot');
  const counter = document.getElementById('current');

  function goTo(n) {{
    if (n < 0 || n >= TOTAL) return;
    slides[current].classList.remove('active');
    dots[current].classList.remove('active');
    current = n;
    slides[current].classList.add('active');
    dots[current].classList.add('active');
    counter.textContent = current + 1;
  }}

  slides[0].classList.add('active');

  document.addEventListener('keydown', function(e) {{
    if (e.key === 'ArrowRight' || e.key === ' ') {{ e.preventDefault(); goTo(current + 1); }}
    if (e.key === 'ArrowLeft') {{ e.preventDefault(); goTo(current - 1); }}
  }});

  dots.forEach(function(dot, i) {{
    dot.addEventListener('click', function() {{ goTo(i); }});
  }});
}})();
</script>
</body>
</html>"""
