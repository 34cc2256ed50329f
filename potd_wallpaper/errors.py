"""Exceptions raised by each stage of the wallpaper pipeline."""


class PotdError(Exception):
    """Base class; ``stage`` names the pipeline step that failed."""

    stage = "wallpaper"


class FetchError(PotdError):
    stage = "fetch"


class ExtractionError(PotdError, ValueError):
    stage = "extract"


class TemplateError(PotdError):
    stage = "template"


class RenderError(PotdError):
    stage = "render"


class DesktopError(PotdError):
    stage = "set wallpaper"
