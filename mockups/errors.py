"""Pipeline exceptions."""


class PipelineError(Exception):
    """Base exception for preview pipeline errors."""

    pass


class ArtworkNotFoundError(PipelineError):
    """Artwork does not exist."""

    pass


class PreviewDestructionError(PipelineError):
    """Stale previews could not be cleared. The run must not dispatch."""

    pass


class RunInProgressError(PipelineError):
    """Another run for the same artwork is in flight."""

    pass


class InputResolutionError(PipelineError):
    """Artwork has no base render for the size a template needs."""

    def __init__(self, artwork_id: int, size: str):
        self.artwork_id = artwork_id
        self.size = size
        super().__init__(f"Artwork {artwork_id} has no base render for size {size}")


class RenderSubmitError(PipelineError):
    """Rendering service rejected or failed a composition submission."""

    pass


class UnknownJobError(PipelineError):
    """Completion reported for a job that was never dispatched."""

    pass
