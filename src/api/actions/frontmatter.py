from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from core.errors import MalformedFrontMatterError
from preprocessing.front_matter import has_front_matter_block, parse_front_matter

router = APIRouter()

class FrontMatterRequest(BaseModel):
    text: str
    path: str | None = None

class FrontMatterResponse(BaseModel):
    has_front_matter: bool
    front_matter: dict[str, Any]
    body: str

@router.post("/frontmatter", response_model=FrontMatterResponse, tags=["Pipeline"])
async def parse_document_front_matter(request: FrontMatterRequest):
    """Parse the front matter of a single document's text."""
    try:
        front_matter, body = parse_front_matter(request.text, path=request.path)
    except MalformedFrontMatterError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return FrontMatterResponse(
        has_front_matter=has_front_matter_block(request.text),
        front_matter=front_matter.to_mapping(mode="json"),
        body=body,
    )
