"""
Adapter base — how bootstrap steps reach subprocesses and dotfiles.

A step never runs ``brew`` or appends to ``~/.zshrc`` itself. It builds
an Action, the registry hands it to the adapter named in
``Action.adapter``, and the step reads the Receipt that comes back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from mise_bootstrap.core.models.action import Action, Receipt


class ExecutionContext(BaseModel):
    """One action plus the directory it runs against."""

    action: Action
    project_root: str = "."

    def param(self, key: str, default: Any = None) -> Any:
        return self.action.params.get(key, default)

    @property
    def working_dir(self) -> str:
        """``cwd`` from the action params, else the project root."""
        return self.param("cwd") or self.project_root


class Adapter(ABC):
    """Performs one kind of side effect and reports it as a Receipt.

    ``execute`` must not raise: a command that exits non-zero or a file
    that cannot be written is a ``failed`` receipt. The step that issued
    the action decides whether that failure is fatal.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry key, matched against ``Action.adapter``."""

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Check the action params before anything runs.

        Returns:
            (is_valid, error_message). error_message is empty if valid.
        """

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Receipt:
        """Perform the action. Never raises."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
