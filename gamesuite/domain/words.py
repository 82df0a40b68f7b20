"""Built-in word list for the word-guessing game."""

DEFAULT_WORDS: tuple[str, ...] = (
    "BEANS", "BRAVE", "CRANE", "DREAM", "EAGLE",
    "FLUTE", "BREAK", "HEART", "IVORY", "JELLY",
    "KNOCK", "MELON", "SCORE", "NOBLE", "OCEAN",
    "PEARL", "QUIET", "RAVEN", "SMILE", "TIGER",
    "URBAN", "VIVID", "WHALE", "TULIP", "YIELD",
    "ZEBRA", "CANDY", "DELTA", "EMBER", "FROST",
    "GLOBE", "HONEY", "INBOX", "JUMPY", "KARMA",
    "LUNAR", "MIRTH", "NURSE", "ORBIT", "PIANO",
    "QUILT", "RIDER", "SPICE", "TOAST", "ULTRA",
    "VAPOR", "WRIST", "YOUTH", "ZESTY", "CRISP",
)
