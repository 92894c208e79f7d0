from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from staff_directory.core.dependencies import get_directory_shell
from staff_directory.models.map import MapView
from staff_directory.models.table import PageRequest, PageSizeRequest, SearchRequest, SortRequest, TablePage
from staff_directory.services.directory_shell import DirectoryShell
from staff_directory.services.table_pipeline import TableStateError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("/table", response_model=TablePage)
async def get_table(shell: DirectoryShell = Depends(get_directory_shell)):  # noqa: B008
    return shell.table_page()


@router.post("/table/search", response_model=TablePage)
async def search_table(
    request: SearchRequest,
    shell: DirectoryShell = Depends(get_directory_shell),  # noqa: B008
):
    shell.table.set_search(request.term)
    return shell.table_page()


@router.post("/table/sort", response_model=TablePage)
async def sort_table(
    request: SortRequest,
    shell: DirectoryShell = Depends(get_directory_shell),  # noqa: B008
):
    try:
        shell.table.request_sort(request.column)
    except TableStateError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    return shell.table_page()


@router.post("/table/page", response_model=TablePage)
async def change_page(
    request: PageRequest,
    shell: DirectoryShell = Depends(get_directory_shell),  # noqa: B008
):
    shell.table.set_page(request.page_index)
    return shell.table_page()


@router.post("/table/page-size", response_model=TablePage)
async def change_page_size(
    request: PageSizeRequest,
    shell: DirectoryShell = Depends(get_directory_shell),  # noqa: B008
):
    try:
        shell.table.set_page_size(request.page_size)
    except TableStateError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    return shell.table_page()


@router.get("/map", response_model=MapView)
async def get_map(shell: DirectoryShell = Depends(get_directory_shell)):  # noqa: B008
    return shell.map_view()
