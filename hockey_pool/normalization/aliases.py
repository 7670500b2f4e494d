"""Alias tables for the skater and team pools.

Both tables are built once at import and exposed read-only. Keys are
case-sensitive; some carry trailing spaces because that is how they show up
in hand-edited rosters.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from loguru import logger


class AliasTableError(Exception):
    """Raised when an alias table is structurally invalid."""

    pass


# Key: roster spelling, Value: "FirstName LastName" as returned by the NHL API
_SKATER_ALIASES: Dict[str, str] = {
    # Edmonton Oilers
    "Draisaitl": "Leon Draisaitl",
    "Leon Draisaitl": "Leon Draisaitl",
    "McDavid": "Connor McDavid",
    "Connor McDavid": "Connor McDavid",
    "Hyman": "Zach Hyman",
    "Zach Hyman": "Zach Hyman",
    # Tampa Bay Lightning
    "Hagel": "Brandon Hagel",
    "Brandon Hagel": "Brandon Hagel",
    "Kucherov": "Nikita Kucherov",
    "Nikita Kucherov": "Nikita Kucherov",
    "Point": "Brayden Point",
    "Brayden Point": "Brayden Point",
    # Los Angeles Kings
    "Kempe": "Adrian Kempe",
    "Adrian Kempe": "Adrian Kempe",
    "Kopitar": "Anze Kopitar",
    "Anze Kopitar": "Anze Kopitar",
    # Pittsburgh Penguins
    "Crosby": "Sidney Crosby",
    "Sidney Crosby": "Sidney Crosby",
    "Guentzel": "Jake Guentzel",
    "Jake Guentzel": "Jake Guentzel",
    # Carolina Hurricanes
    "Jarvis": "Seth Jarvis",
    "Seth Jarvis": "Seth Jarvis",
    "Necas": "Martin Necas",
    "Martin Necas": "Martin Necas",
    "Aho": "Sebastian Aho",
    "Sebastian Aho": "Sebastian Aho",
    # Buffalo Sabres
    "Thompson": "Tage Thompson",
    "Tage Thompson": "Tage Thompson",
    "Dahlin": "Rasmus Dahlin",
    "Rasmus Dahlin": "Rasmus Dahlin",
    "Tuch": "Alex Tuch",
    "Alex Tuch": "Alex Tuch",
    # Toronto Maple Leafs
    "Marner": "Mitch Marner",
    "Mitch Marner": "Mitch Marner",
    "Matthews": "Auston Matthews",
    "Auston Matthews": "Auston Matthews",
    "Nylander": "William Nylander",
    "William Nylander": "William Nylander",
    "Tavares": "John Tavares",
    "John Tavares": "John Tavares",
    "Knies": "Matthew Knies",
    "Matthew Knies": "Matthew Knies",
    # Boston Bruins
    "Marchand": "Brad Marchand",
    "Brad Marchand": "Brad Marchand",
    "Marchand ": "Brad Marchand",
    "Pastrnak": "David Pastrnak",
    "David Pastrnak": "David Pastrnak",
    # New Jersey Devils
    "J Hughes": "Jack Hughes",
    "Jack Hughes": "Jack Hughes",
    "Hughes": "Jack Hughes",
    "Hischier": "Nico Hischier",
    "Nico Hischier": "Nico Hischier",
    # San Jose Sharks
    "Celebrini": "Macklin Celebrini",
    "Macklin Celebrini": "Macklin Celebrini",
    "Celebrini ": "Macklin Celebrini",
    # Detroit Red Wings
    "DeBrincat": "Alex DeBrincat",
    "Alex DeBrincat": "Alex DeBrincat",
    "Larkin": "Dylan Larkin",
    "Dylan Larkin": "Dylan Larkin",
    # St. Louis Blues
    "Kyrou": "Jordan Kyrou",
    "Jordan Kyrou": "Jordan Kyrou",
    # Columbus Blue Jackets
    "Marchenko": "Kirill Marchenko",
    "Kirill Marchenko": "Kirill Marchenko",
    "Marchenko ": "Kirill Marchenko",
    "Fantilli": "Adam Fantilli",
    "Adam Fantilli": "Adam Fantilli",
    # Vegas Golden Knights
    "Dorofeyev": "Pavel Dorofeyev",
    "Pavel Dorofeyev": "Pavel Dorofeyev",
    "Eichel": "Jack Eichel",
    "Jack Eichel": "Jack Eichel",
    # Washington Capitals
    "Protas": "Aliaksei Protas",
    "Aliaksei Protas": "Aliaksei Protas",
    "Protas ": "Aliaksei Protas",
    "Ovechkin": "Alex Ovechkin",
    "Alex Ovechkin": "Alex Ovechkin",
    # Florida Panthers
    "Reinhart": "Sam Reinhart",
    "Sam Reinhart": "Sam Reinhart",
    "Barkov": "Aleksander Barkov",
    "Aleksander Barkov": "Aleksander Barkov",
    # Dallas Stars
    "Robertson": "Jason Robertson",
    "Jason Robertson": "Jason Robertson",
    "Johnston": "Wyatt Johnston",
    "Wyatt Johnston": "Wyatt Johnston",
    # Minnesota Wild
    "Fiala": "Kevin Fiala",
    "Kevin Fiala": "Kevin Fiala",
    "Kaprizov": "Kirill Kaprizov",
    "Kirill Kaprizov": "Kirill Kaprizov",
    # Colorado Avalanche
    "Rantanen": "Mikko Rantanen",
    "Mikko Rantanen": "Mikko Rantanen",
    "MacKinnon": "Nathan MacKinnon",
    "Nathan MacKinnon": "Nathan MacKinnon",
    # Nashville Predators
    "Forsberg": "Filip Forsberg",
    "Filip Forsberg": "Filip Forsberg",
    # Winnipeg Jets
    "Connor": "Kyle Connor",
    "Kyle Connor": "Kyle Connor",
    "Scheifele": "Mark Scheifele",
    "Mark Scheifele": "Mark Scheifele",
    # Montreal Canadiens
    "Caufield": "Cole Caufield",
    "Cole Caufield": "Cole Caufield",
    # Utah
    "Keller": "Clayton Keller",
    "Clayton Keller": "Clayton Keller",
    # New York Rangers
    "Panarin": "Artemi Panarin",
    "Artemi Panarin": "Artemi Panarin",
    # Chicago Blackhawks
    "Bedard": "Connor Bedard",
    "Connor Bedard": "Connor Bedard",
    # Philadelphia Flyers
    "Gauthier": "Cutter Gauthier",
    "Cutter Gauthier": "Cutter Gauthier",
}

# Key: abbreviation, Value: teamName.default as returned by the standings API
_NHL_OFFICIAL_TEAMS: Dict[str, str] = {
    "ANA": "Anaheim Ducks",
    "BOS": "Boston Bruins",
    "BUF": "Buffalo Sabres",
    "CGY": "Calgary Flames",
    "CAR": "Carolina Hurricanes",
    "CHI": "Chicago Blackhawks",
    "COL": "Colorado Avalanche",
    "CBJ": "Columbus Blue Jackets",
    "DAL": "Dallas Stars",
    "DET": "Detroit Red Wings",
    "EDM": "Edmonton Oilers",
    "FLA": "Florida Panthers",
    "LAK": "Los Angeles Kings",
    "MIN": "Minnesota Wild",
    "MTL": "Montréal Canadiens",
    "NSH": "Nashville Predators",
    "NJD": "New Jersey Devils",
    "NYI": "New York Islanders",
    "NYR": "New York Rangers",
    "OTT": "Ottawa Senators",
    "PHI": "Philadelphia Flyers",
    "PIT": "Pittsburgh Penguins",
    "SJS": "San Jose Sharks",
    "SEA": "Seattle Kraken",
    "STL": "St. Louis Blues",
    "TBL": "Tampa Bay Lightning",
    "TOR": "Toronto Maple Leafs",
    "UTA": "Utah Mammoth",
    "VAN": "Vancouver Canucks",
    "VGK": "Vegas Golden Knights",
    "WSH": "Washington Capitals",
    "WPG": "Winnipeg Jets",
}

# Key: roster spelling, Value: abbreviation (resolved through _NHL_OFFICIAL_TEAMS)
_TEAM_ALIASES: Dict[str, str] = {
    # Full names
    "Anaheim Ducks": "ANA",
    "Boston Bruins": "BOS",
    "Buffalo Sabres": "BUF",
    "Calgary Flames": "CGY",
    "Carolina Hurricanes": "CAR",
    "Chicago Blackhawks": "CHI",
    "Colorado Avalanche": "COL",
    "Columbus Blue Jackets": "CBJ",
    "Dallas Stars": "DAL",
    "Detroit Red Wings": "DET",
    "Edmonton Oilers": "EDM",
    "Florida Panthers": "FLA",
    "Los Angeles Kings": "LAK",
    "Minnesota Wild": "MIN",
    "Montréal Canadiens": "MTL",
    "Montreal Canadiens": "MTL",  # Without accent
    "Nashville Predators": "NSH",
    "New Jersey Devils": "NJD",
    "New York Islanders": "NYI",
    "New York Rangers": "NYR",
    "Ottawa Senators": "OTT",
    "Philadelphia Flyers": "PHI",
    "Pittsburgh Penguins": "PIT",
    "San Jose Sharks": "SJS",
    "Seattle Kraken": "SEA",
    "St. Louis Blues": "STL",
    "St Louis Blues": "STL",
    "Tampa Bay Lightning": "TBL",
    "Toronto Maple Leafs": "TOR",
    "Utah Hockey Club": "UTA",
    "Utah": "UTA",
    "Utah Mammoth": "UTA",
    "Vancouver Canucks": "VAN",
    "Vegas Golden Knights": "VGK",
    "Washington Capitals": "WSH",
    "Winnipeg Jets": "WPG",
    # Abbreviations
    "ANA": "ANA",
    "BOS": "BOS",
    "BUF": "BUF",
    "CGY": "CGY",
    "CAR": "CAR",
    "CHI": "CHI",
    "COL": "COL",
    "CBJ": "CBJ",
    "DAL": "DAL",
    "DET": "DET",
    "EDM": "EDM",
    "FLA": "FLA",
    "LAK": "LAK",
    "LA": "LAK",
    "L.A": "LAK",
    "MIN": "MIN",
    "MTL": "MTL",
    "NSH": "NSH",
    "NJD": "NJD",
    "NJ": "NJD",
    "N.J": "NJD",
    "NYI": "NYI",
    "NYR": "NYR",
    "OTT": "OTT",
    "PHI": "PHI",
    "PIT": "PIT",
    "SJS": "SJS",
    "SJ": "SJS",
    "S.J": "SJS",
    "SEA": "SEA",
    "STL": "STL",
    "TBL": "TBL",
    "TB": "TBL",
    "T.B": "TBL",
    "TOR": "TOR",
    "UTA": "UTA",
    "VAN": "VAN",
    "VGK": "VGK",
    "WSH": "WSH",
    "WPG": "WPG",
    # Common variations
    "Ducks": "ANA",
    "Bruins": "BOS",
    "Sabres": "BUF",
    "Flames": "CGY",
    "Hurricanes": "CAR",
    "Canes": "CAR",
    "Blackhawks": "CHI",
    "Avalanche": "COL",
    "Avs": "COL",
    "Blue Jackets": "CBJ",
    "Stars": "DAL",
    "Red Wings": "DET",
    "Oilers": "EDM",
    "Panthers": "FLA",
    "Kings": "LAK",
    "Wild": "MIN",
    "Canadiens": "MTL",
    "Habs": "MTL",
    "Predators": "NSH",
    "Preds": "NSH",
    "Devils": "NJD",
    "Islanders": "NYI",
    "Rangers": "NYR",
    "Senators": "OTT",
    "Sens": "OTT",
    "Flyers": "PHI",
    "Penguins": "PIT",
    "Pens": "PIT",
    "Sharks": "SJS",
    "Kraken": "SEA",
    "Blues": "STL",
    "Lightning": "TBL",
    "Bolts": "TBL",
    "Maple Leafs": "TOR",
    "Leafs": "TOR",
    "Mammoth": "UTA",
    "Canucks": "VAN",
    "Golden Knights": "VGK",
    "Knights": "VGK",
    "Capitals": "WSH",
    "Caps": "WSH",
    "Jets": "WPG",
}


def build_alias_table(aliases: Mapping[str, str]) -> Mapping[str, str]:
    """Returns a read-only alias table closed under identity.

    Every canonical name is added as its own alias (without overriding an
    explicit entry) so canonical inputs always round-trip.
    """
    table: Dict[str, str] = dict(aliases)
    for canonical in list(aliases.values()):
        table.setdefault(canonical, canonical)
    return MappingProxyType(table)


def build_team_alias_table(
    aliases: Mapping[str, str], official_teams: Mapping[str, str]
) -> Mapping[str, str]:
    """Flattens alias -> abbreviation -> full name into alias -> full name.

    Raises:
        AliasTableError: if an alias points at an abbreviation that does not
            resolve to an official team name.
    """
    unresolved = sorted(
        {abbr for abbr in aliases.values() if abbr not in official_teams}
    )
    if unresolved:
        raise AliasTableError(
            f"Team aliases reference unknown abbreviations: {', '.join(unresolved)}"
        )
    return build_alias_table(
        {alias: official_teams[abbr] for alias, abbr in aliases.items()}
    )


def validate_alias_table(table: Mapping[str, str]) -> List[Tuple[str, List[str]]]:
    """Startup check for case-insensitive alias collisions.

    The case-insensitive lookup takes the first alias in table order, so two
    aliases that differ only by case but point at different canonical names
    make the result order-dependent. Returns (lowercased alias, canonical
    names) for every such collision; an empty list means the table is clean.
    """
    claimed: Dict[str, List[str]] = {}
    for alias, canonical in table.items():
        names = claimed.setdefault(alias.lower(), [])
        if canonical not in names:
            names.append(canonical)

    collisions = [(alias, names) for alias, names in claimed.items() if len(names) > 1]
    for alias, names in collisions:
        logger.warning(
            f"Alias '{alias}' is ambiguous ignoring case: maps to {', '.join(names)}"
        )

    missing_identity = [
        canonical for canonical in set(table.values()) if table.get(canonical) != canonical
    ]
    for canonical in sorted(missing_identity):
        logger.warning(f"Canonical name '{canonical}' does not map to itself")

    return collisions


SKATER_ALIASES: Mapping[str, str] = build_alias_table(_SKATER_ALIASES)
NHL_OFFICIAL_TEAMS: Mapping[str, str] = MappingProxyType(dict(_NHL_OFFICIAL_TEAMS))
TEAM_ALIASES: Mapping[str, str] = build_team_alias_table(
    _TEAM_ALIASES, NHL_OFFICIAL_TEAMS
)
