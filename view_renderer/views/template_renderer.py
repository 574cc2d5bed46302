"""View/layout template renderer."""

import logging
from collections.abc import Mapping
from typing import Any

from fastapi import Request
from starlette.concurrency import run_in_threadpool

from view_renderer.exceptions import classify_error
from view_renderer.logging_config import log_with_context
from view_renderer.models import (
    HTML_CONTENT_TYPE,
    INTERNAL_ERROR_MESSAGE,
    HttpFault,
    InternalFault,
    LayoutData,
    RenderFault,
    RenderOptions,
    RenderResult,
    RenderSuccess,
    ResponseShell,
)
from view_renderer.protocols import TemplateEngine


class ViewRenderer:
    """Renders an optional view template inside an optional layout template.

    The renderer holds only read-only configuration, so a single instance can
    serve concurrent requests.
    """

    def __init__(
        self,
        engine: TemplateEngine,
        default_layout: str | None = None,
        logger: logging.Logger | None = None,
    ):
        """Initialize the renderer.

        Args:
            engine: Template engine used for both the view and the layout
            default_layout: Layout used when the render options name none
            logger: Where rendering failures are reported; None disables logging
        """
        self.engine = engine
        self.default_layout = default_layout
        self.logger = logger

    def render(
        self,
        request: Request,
        response: ResponseShell,
        options: RenderOptions | Mapping[str, Any],
        data: Any,
    ) -> ResponseShell:
        """Render the view and layout into an HTML response.

        Never raises: failures are logged and turned into an error response
        through render_error. The status of a successful response is left as
        the caller set it.

        Args:
            request: Incoming request
            response: Response to build on
            options: Render options (model or plain mapping)
            data: Context for the view template, passed through unchanged

        Returns:
            New ResponseShell with Content-Type text/html and the rendered body
        """
        try:
            options = self._coerce_options(options)
            view_file_path = options.view_file_path
            layout_file_path = (
                options.layout_file_path if options.layout_file_path is not None else self.default_layout
            )
            result = self.compose(data, options, view_file_path, layout_file_path)
        except Exception as e:
            result = classify_error(e)

        if isinstance(result, RenderSuccess):
            return response.with_header("Content-Type", HTML_CONTENT_TYPE).with_body(result.content)

        self._log_failure(request, result)
        return self.render_error(request, response, options, result)

    async def render_async(
        self,
        request: Request,
        response: ResponseShell,
        options: RenderOptions | Mapping[str, Any],
        data: Any,
    ) -> ResponseShell:
        """Same as render, with template work run in the thread pool."""
        return await run_in_threadpool(self.render, request, response, options, data)

    def render_error(
        self,
        request: Request,
        response: ResponseShell,
        options: RenderOptions | Mapping[str, Any],
        error: BaseException | RenderFault,
    ) -> ResponseShell:
        """Build an HTML error response.

        HTTP faults keep their status and message. Every other error becomes a
        500 with a fixed message so internal details never reach the client.
        """
        fault = error if isinstance(error, (HttpFault, InternalFault)) else classify_error(error)

        response = response.with_header("Content-Type", HTML_CONTENT_TYPE)
        if isinstance(fault, HttpFault):
            return response.with_status(fault.status_code).with_body(fault.message)
        return response.with_status(500).with_body(INTERNAL_ERROR_MESSAGE)

    def compose(
        self,
        data: Any,
        options: RenderOptions,
        view_file_path: str | None = None,
        layout_file_path: str | None = None,
    ) -> RenderResult:
        """Render the view, then feed its output to the layout.

        Stops at the first stage that fails and returns its classified fault.
        """
        content = ""

        if view_file_path:
            try:
                content = self.engine.render(view_file_path, data)
            except Exception as e:
                return classify_error(e)

        if layout_file_path:
            options = options.deduplicated()
            layout_data = LayoutData.from_options(content, options)
            try:
                content = self.engine.render(layout_file_path, layout_data.as_context())
            except Exception as e:
                return classify_error(e)

        return RenderSuccess(content=content)

    @staticmethod
    def _coerce_options(options: RenderOptions | Mapping[str, Any]) -> RenderOptions:
        if isinstance(options, RenderOptions):
            return options
        return RenderOptions.model_validate(dict(options))

    def _log_failure(self, request: Request, fault: RenderFault) -> None:
        if self.logger is None:
            return

        cause = fault.cause
        request_fields: dict[str, Any] = {}
        if isinstance(request, Request):
            request_fields = {"method": request.method, "url": str(request.url)}

        log_with_context(
            self.logger,
            "warning",
            "View rendering failed",
            exc_info=cause,
            error=str(cause) if cause is not None else fault.message,
            error_type=type(cause).__name__ if cause is not None else type(fault).__name__,
            status_code=fault.status_code,
            event_type="view_render_error",
            **request_fields,
        )
