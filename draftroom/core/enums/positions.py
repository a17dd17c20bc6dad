"""Roster role definitions for draft evaluation."""

from enum import Enum, auto
from typing import Optional


class RoleGroup(Enum):
    """High-level role groupings."""

    OFFENSE = auto()
    DEFENSE = auto()
    SPECIAL_TEAMS = auto()


class Role(Enum):
    """
    Positional roles a player can be evaluated at.

    Member order is the evaluation table order, which is also the
    tie-break order when two roles score the same.
    """

    # Offense - Skill positions
    QB = "QB"  # Quarterback
    HB = "HB"  # Halfback
    FB = "FB"  # Fullback
    WR = "WR"  # Wide Receiver
    TE = "TE"  # Tight End

    # Offense - Line
    LT = "LT"  # Left Tackle
    LG = "LG"  # Left Guard
    C = "C"  # Center
    RG = "RG"  # Right Guard
    RT = "RT"  # Right Tackle

    # Defense - Line
    LE = "LE"  # Left End
    RE = "RE"  # Right End
    DT = "DT"  # Defensive Tackle

    # Defense - Linebackers
    LOLB = "LOLB"  # Left Outside Linebacker
    MLB = "MLB"  # Middle Linebacker
    ROLB = "ROLB"  # Right Outside Linebacker

    # Defense - Secondary
    CB = "CB"  # Cornerback
    FS = "FS"  # Free Safety
    SS = "SS"  # Strong Safety

    # Special Teams
    K = "K"  # Kicker
    P = "P"  # Punter

    @classmethod
    def from_code(cls, code: "Role | str") -> Optional["Role"]:
        """
        Look up a role by its code.

        Accepts a Role, an exact code ("QB"), lowercase codes, and the
        common "RB" alias for halfback. Returns None for unknown codes.
        """
        if isinstance(code, Role):
            return code
        if not isinstance(code, str):
            return None
        normalized = code.strip().upper()
        normalized = _ROLE_ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            return None

    @property
    def group(self) -> RoleGroup:
        """Get the role group for this role."""
        if self in _OFFENSE:
            return RoleGroup.OFFENSE
        if self in _DEFENSE:
            return RoleGroup.DEFENSE
        return RoleGroup.SPECIAL_TEAMS


_ROLE_ALIASES = {"RB": "HB"}

_OFFENSE = frozenset(
    {Role.QB, Role.HB, Role.FB, Role.WR, Role.TE, Role.LT, Role.LG, Role.C, Role.RG, Role.RT}
)
_DEFENSE = frozenset(
    {Role.LE, Role.RE, Role.DT, Role.LOLB, Role.MLB, Role.ROLB, Role.CB, Role.FS, Role.SS}
)
