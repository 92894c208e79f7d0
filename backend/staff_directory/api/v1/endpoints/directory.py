from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from staff_directory.core.dependencies import get_directory_shell
from staff_directory.models.directory import DismissRequest, ShellState, ViewModeRequest
from staff_directory.services.directory_shell import DirectoryShell

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/directory", tags=["directory"])


@router.get("", response_model=ShellState)
async def get_directory(shell: DirectoryShell = Depends(get_directory_shell)):  # noqa: B008
    return await shell.render()


@router.put("/view", response_model=ShellState)
async def select_view(
    request: ViewModeRequest,
    shell: DirectoryShell = Depends(get_directory_shell),  # noqa: B008
):
    logger.debug("View mode %s -> %s", shell.view_mode.value, request.mode.value)
    shell.select_view(request.mode)
    return await shell.render()


@router.post("/notification/dismiss")
async def dismiss_notification(
    request: DismissRequest,
    shell: DirectoryShell = Depends(get_directory_shell),  # noqa: B008
):
    closed = shell.notifications.dismiss(request.reason)
    return {"dismissed": closed, "notification": shell.notifications.current}
