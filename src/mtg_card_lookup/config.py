import os
from dotenv import load_dotenv

load_dotenv()

MTG_API_BASE_URL = os.getenv("MTG_API_BASE_URL", "https://api.magicthegathering.io")
CARDS_ENDPOINT = "/v1/cards"
USER_AGENT = os.getenv("MTG_API_USER_AGENT", "MTGCardLookup/1.0")

# Lookups run when no names are given on the command line
DEFAULT_CARD_NAMES = ("Opt", "Black Lotus", "abcdefghj")
