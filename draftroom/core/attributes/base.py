"""Base attribute definitions."""

from dataclasses import dataclass
from enum import Enum, auto


class AttributeCategory(Enum):
    """Categories for player attributes."""

    PHYSICAL = auto()
    PASSING = auto()
    RUSHING = auto()
    RECEIVING = auto()
    BLOCKING = auto()
    DEFENSE = auto()
    SPECIAL_TEAMS = auto()
    MENTAL = auto()


@dataclass(frozen=True)
class AttributeDefinition:
    """
    Defines an attribute type (not a value).

    Attributes are defined once here. Each snapshot then carries an
    optional value for every defined attribute.
    """

    name: str
    category: AttributeCategory
    abbreviation: str
    description: str = ""
    min_value: int = 0
    max_value: int = 99

    def in_range(self, value: int) -> bool:
        """Check a value against the valid range."""
        return self.min_value <= value <= self.max_value

    def clamp(self, value: int) -> int:
        """Clamp a value to valid range."""
        return max(self.min_value, min(self.max_value, value))


_P = AttributeCategory.PHYSICAL
_PA = AttributeCategory.PASSING
_RU = AttributeCategory.RUSHING
_RE = AttributeCategory.RECEIVING
_BL = AttributeCategory.BLOCKING
_DE = AttributeCategory.DEFENSE
_ST = AttributeCategory.SPECIAL_TEAMS
_ME = AttributeCategory.MENTAL


ALL_ATTRIBUTES: list[AttributeDefinition] = [
    # Physical
    AttributeDefinition("speed", _P, "SPD", "Top running speed"),
    AttributeDefinition("acceleration", _P, "ACC", "How quickly player reaches top speed"),
    AttributeDefinition("agility", _P, "AGI", "Quickness in changing direction"),
    AttributeDefinition("strength", _P, "STR", "Raw physical power"),
    AttributeDefinition("jumping", _P, "JMP", "Vertical leap ability"),
    AttributeDefinition("stamina", _P, "STA", "Endurance throughout game"),
    AttributeDefinition("injury", _P, "INJ", "Resistance to injury (higher = more durable)"),
    AttributeDefinition("toughness", _P, "TGH", "Playing through contact and pain"),
    AttributeDefinition("change_of_direction", _P, "COD", "Cutting without losing speed"),
    # Passing
    AttributeDefinition("throw_power", _PA, "THP", "Arm strength for deep throws"),
    AttributeDefinition("throw_accuracy_short", _PA, "SAC", "Accuracy on short passes"),
    AttributeDefinition("throw_accuracy_mid", _PA, "MAC", "Accuracy on intermediate passes"),
    AttributeDefinition("throw_accuracy_deep", _PA, "DAC", "Accuracy on deep passes"),
    AttributeDefinition("throw_on_the_run", _PA, "TOR", "Passing accuracy while moving"),
    AttributeDefinition("throw_under_pressure", _PA, "TUP", "Passing accuracy with a collapsing pocket"),
    AttributeDefinition("play_action", _PA, "PAC", "Effectiveness of play action fakes"),
    AttributeDefinition("break_sack", _PA, "BSK", "Escaping would-be sacks"),
    # Rushing
    AttributeDefinition("carrying", _RU, "CAR", "Ball security while running"),
    AttributeDefinition("trucking", _RU, "TRK", "Running through defenders"),
    AttributeDefinition("break_tackle", _RU, "BTK", "Breaking through tackle attempts"),
    AttributeDefinition("juke_move", _RU, "JKM", "Juke move effectiveness"),
    AttributeDefinition("spin_move", _RU, "SPM", "Spin move effectiveness"),
    AttributeDefinition("stiff_arm", _RU, "SFA", "Stiff arm effectiveness"),
    AttributeDefinition("bc_vision", _RU, "BCV", "Finding and hitting the open lane"),
    # Receiving
    AttributeDefinition("catching", _RE, "CTH", "Ability to catch the ball"),
    AttributeDefinition("catch_in_traffic", _RE, "CIT", "Catching with defenders nearby"),
    AttributeDefinition("spectacular_catch", _RE, "SPC", "Making difficult catches"),
    AttributeDefinition("short_route_running", _RE, "SRR", "Precision on short routes"),
    AttributeDefinition("medium_route_running", _RE, "MRR", "Precision on intermediate routes"),
    AttributeDefinition("deep_route_running", _RE, "DRR", "Precision on deep routes"),
    AttributeDefinition("release", _RE, "RLS", "Getting off the line against press coverage"),
    # Blocking
    AttributeDefinition("pass_block", _BL, "PBK", "Pass protection ability"),
    AttributeDefinition("pass_block_power", _BL, "PBP", "Anchoring against power rushers"),
    AttributeDefinition("pass_block_finesse", _BL, "PBF", "Mirroring finesse rushers"),
    AttributeDefinition("run_block", _BL, "RBK", "Run blocking ability"),
    AttributeDefinition("run_block_power", _BL, "RBP", "Driving defenders off the ball"),
    AttributeDefinition("run_block_finesse", _BL, "RBF", "Reach and zone blocking technique"),
    AttributeDefinition("lead_block", _BL, "LBK", "Blocking in space ahead of the runner"),
    AttributeDefinition("impact_blocking", _BL, "IBL", "Blocking at the second level"),
    # Defense
    AttributeDefinition("tackle", _DE, "TAK", "Ability to bring down ball carrier"),
    AttributeDefinition("hit_power", _DE, "POW", "Force of tackles and hits"),
    AttributeDefinition("block_shedding", _DE, "BSH", "Getting past blockers"),
    AttributeDefinition("pursuit", _DE, "PUR", "Chase angles and effort"),
    AttributeDefinition("play_recognition", _DE, "PRC", "Reading offensive plays"),
    AttributeDefinition("man_coverage", _DE, "MCV", "Man-to-man coverage ability"),
    AttributeDefinition("zone_coverage", _DE, "ZCV", "Zone coverage ability"),
    AttributeDefinition("press", _DE, "PRS", "Press coverage at the line"),
    AttributeDefinition("finesse_moves", _DE, "FMV", "Pass rush finesse technique"),
    AttributeDefinition("power_moves", _DE, "PMV", "Pass rush power technique"),
    # Special Teams
    AttributeDefinition("kick_power", _ST, "KPW", "Kicking distance"),
    AttributeDefinition("kick_accuracy", _ST, "KAC", "Kicking precision"),
    AttributeDefinition("kick_return", _ST, "KR", "Fielding and returning kicks"),
    # Mental
    AttributeDefinition("awareness", _ME, "AWR", "Football IQ and instincts"),
]

ATTRIBUTES_BY_NAME: dict[str, AttributeDefinition] = {a.name: a for a in ALL_ATTRIBUTES}

ATTRIBUTE_NAMES: tuple[str, ...] = tuple(a.name for a in ALL_ATTRIBUTES)


def get_attribute(name: str) -> AttributeDefinition:
    """Get an attribute definition by name."""
    if name not in ATTRIBUTES_BY_NAME:
        raise KeyError(f"Unknown attribute: {name}")
    return ATTRIBUTES_BY_NAME[name]


def get_by_category(category: AttributeCategory) -> list[AttributeDefinition]:
    """Get all attributes in a category."""
    return [a for a in ALL_ATTRIBUTES if a.category == category]
