"""Selection of catalogued milestones from a command-line style argument."""

from dataclasses import dataclass, field

from .constants import ALL_MILESTONES
from .errors import SelectionError
from .models import Version
from .versions import MILESTONES, get_milestone


@dataclass(frozen=True)
class MilestoneSelection:
    """Either every milestone or an explicit list of milestone names.

    Attributes:
        names: Selected names, empty when everything is selected.
    """

    names: tuple[str, ...] = field(default=())

    @classmethod
    def parse(cls, text: str) -> "MilestoneSelection":
        """Parse ``*`` or a comma-separated list such as ``v0.1.0,v2023-03-21``.

        Raises:
            SelectionError: If a non-empty list contains no milestone names.
        """
        text = text.strip()
        if text == ALL_MILESTONES or not text:
            return cls()
        names = tuple(name.strip() for name in text.split(",") if name.strip())
        if not names:
            raise SelectionError(f"No milestone names in selection: {text!r}")
        return cls(names=names)

    @property
    def is_all(self) -> bool:
        return not self.names

    def resolve(self) -> list[tuple[str, Version]]:
        """Selected milestones in release order.

        Raises:
            UnknownMilestoneError: If a selected name is not catalogued.
        """
        if self.is_all:
            return list(MILESTONES.items())
        selected = {name: get_milestone(name) for name in self.names}
        return sorted(selected.items(), key=lambda item: item[1].cmpable)

    def __str__(self) -> str:
        return ALL_MILESTONES if self.is_all else ",".join(self.names)
