"""Random player names."""

import random

FIRST_NAMES = (
    "Jalen", "Marcus", "Tyrese", "Devin", "Andre", "Malik", "Cameron", "Isaiah",
    "Jordan", "Darius", "Keon", "Xavier", "Elijah", "Trey", "Caleb", "Nico",
    "Luka", "Dante", "Miles", "Terrence", "Jamal", "Victor", "Reggie", "Omar",
    "Bryce", "Shane", "Kendrick", "Paolo", "Jaden", "Cole",
)

LAST_NAMES = (
    "Bishop", "Carter", "Dawson", "Ellis", "Fuller", "Graham", "Hayes", "Ingram",
    "Jennings", "Knox", "Lowry", "Mercer", "Nash", "Owens", "Porter", "Reyes",
    "Sutton", "Thornton", "Vance", "Whitfield", "Young", "Banks", "Coleman", "Drake",
    "Foster", "Gaines", "Holloway", "Jefferson", "Maddox", "Pruitt",
)


def generate_name(rng: random.Random) -> str:
    return f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}"
