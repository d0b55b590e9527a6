"""Domain errors raised by the rendering and content pipeline.

Controllers translate these into ``HTTPException``; nothing below the
controller layer knows about HTTP.
"""


class TemplateNotFoundError(LookupError):
    def __init__(self, template_id: str):
        super().__init__(f"Template not found: {template_id}")
        self.template_id = template_id


class DocumentGenerationError(RuntimeError):
    """Rendering or serialization failed.

    The original exception is chained as ``__cause__``. The same input
    fails the same way, so callers should not retry.
    """

    def __init__(self, stage: str, message: str):
        super().__init__(f"Failed to generate the document ({stage}): {message}")
        self.stage = stage


class ContentGenerationError(RuntimeError):
    """The AI content provider failed and no fallback was allowed."""
