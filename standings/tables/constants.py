# Shared table names so the loader, registry and routes all agree
FIRST_WEEK = 1
LAST_WEEK = 15

# logical name -> (csv file, page it feeds)
FIXED_TABLES = {
    "current-standings": ("current-standings.csv", "Current Standings page"),
    "previous-standings": ("previous-standings.csv", "Previous Standings page"),
    "total-points": ("total-points.csv", "Total Points page"),
    "2024-comparison": ("2024-comparison.csv", "2024 Standing Comparison page"),
    "all-games": ("all-games.csv", "All Games page"),
}


def week_name(week: int) -> str:
    return f"week-{week}"


WEEK_TABLES = {
    week_name(w): (f"{week_name(w)}.csv", "individual week pages")
    for w in range(FIRST_WEEK, LAST_WEEK + 1)
}

KNOWN_TABLES = {**FIXED_TABLES, **WEEK_TABLES}

# Which tables each deployment variant loads
TABLE_SETS = {
    "full": frozenset(KNOWN_TABLES),
    "core": frozenset({"current-standings", "total-points", *WEEK_TABLES}),
}
DEFAULT_TABLE_SET = "full"
