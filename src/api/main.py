from __future__ import annotations

from fastapi import FastAPI, HTTPException
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, ConfigDict, ValidationError

from api.actions import config, frontmatter, health
from core.errors import ContentRootError
from schemas.requests import BuildInput, BuildOptions
from schemas.responses import BuildResult
from services.build_runner import run_build

app = FastAPI(title="docsite API")
app.include_router(health.router)
app.include_router(config.router)
app.include_router(frontmatter.router)


class BuildRequest(BaseModel):
    input: BuildInput
    options: dict | None = None

    model_config = ConfigDict(extra="forbid")


@app.post("/build", response_model=BuildResult, tags=["Pipeline"])
async def build_endpoint(request: BuildRequest):
    """
    Build a documentation corpus on the server.

    Args:
        request: Content root plus optional BuildOptions overrides.
    """
    try:
        options_obj = BuildOptions.model_validate(request.options or {})
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=f"Invalid options: {e}")

    try:
        return await run_in_threadpool(run_build, request.input, options_obj)
    except ContentRootError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
