"""HTTP surface mirroring the tool protocol for scripting and debugging."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import Body, FastAPI, HTTPException
from pydantic import BaseModel

from ..settings import ServerSettings
from ..toolkit import Toolkit


class ToolDescription(BaseModel):
    name: str
    description: str
    input_schema: Dict[str, Any]


class ToolListResponse(BaseModel):
    data: List[ToolDescription]


class ToolCallResponse(BaseModel):
    tool: str
    text: str
    is_error: bool


def create_app(
    toolkit: Toolkit | None = None,
    *,
    settings: ServerSettings | None = None,
) -> FastAPI:
    """Create a FastAPI app dispatching requests onto ``toolkit``."""

    resolved = toolkit
    if resolved is None:
        resolved = Toolkit.from_settings(settings or ServerSettings.from_env())

    app = FastAPI(title="RPG Maker MZ Database Tools")

    @app.get("/api/tools", response_model=ToolListResponse, tags=["Tools"])
    def list_tools() -> ToolListResponse:
        return ToolListResponse(
            data=[
                ToolDescription(
                    name=tool.name,
                    description=tool.description,
                    input_schema=tool.input_schema(),
                )
                for tool in resolved.available_tools
            ]
        )

    @app.post("/api/tools/{name}", response_model=ToolCallResponse, tags=["Tools"])
    def call_tool(
        name: str,
        arguments: Dict[str, Any] | None = Body(default=None),
    ) -> ToolCallResponse:
        try:
            result = resolved.invoke(name, arguments)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=f"Unknown tool '{name}'") from exc
        return ToolCallResponse(tool=name, **result.to_payload())

    return app


__all__ = ["create_app"]
