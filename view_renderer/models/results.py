"""Tagged results of the view/layout composition pipeline."""

from pydantic import BaseModel, ConfigDict

INTERNAL_ERROR_MESSAGE = "Internal server error"


class RenderSuccess(BaseModel):
    """Composition finished; content is the final HTML."""

    model_config = ConfigDict(frozen=True)

    content: str


class HttpFault(BaseModel):
    """Failure to show the client with its own status and message."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status_code: int
    message: str
    cause: BaseException | None = None


class InternalFault(BaseModel):
    """Any other failure. Nothing about it reaches the client."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    cause: BaseException | None = None

    @property
    def status_code(self) -> int:
        return 500

    @property
    def message(self) -> str:
        return INTERNAL_ERROR_MESSAGE


RenderFault = HttpFault | InternalFault
RenderResult = RenderSuccess | HttpFault | InternalFault
