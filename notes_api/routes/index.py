"""
Notes API — Root Page
=======================

GET / serves a small HTML page confirming the API is up.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["Index"])

INDEX_PAGE = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>Notes App</title>
  </head>
  <body>
    <h1>Notes App API is Running!</h1>
  </body>
</html>
"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index() -> HTMLResponse:
    return HTMLResponse(content=INDEX_PAGE)
