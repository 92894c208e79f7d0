from __future__ import annotations

import logging

from fastapi import Depends

from staff_directory.services.directory_shell import DirectoryShell, directory_shell
from staff_directory.services.employee_form import EmployeeForm

logger = logging.getLogger(__name__)


async def get_directory_shell() -> DirectoryShell:
    # Every request is a mount signal; the shell fetches only on the first one.
    if not directory_shell.fetch_started:
        logger.info("Mounting directory shell")
    await directory_shell.mount()
    return directory_shell


async def get_employee_form(shell: DirectoryShell = Depends(get_directory_shell)) -> EmployeeForm:  # noqa: B008
    return await shell.mount_form()
