"""Memorable password generator.

Builds a password from an adjective, a noun, a two-digit and a three-digit
number and two symbols, shuffled into a random order.
"""
import logging
import secrets
from typing import List

logger = logging.getLogger(__name__)

ADJECTIVES = (
    "Brave", "Calm", "Smart", "Mighty", "Happy", "Lucky", "Quick", "Bright", "Kind", "Bold",
    "Wise", "Strong", "Gentle", "Joyful", "Friendly", "Clever", "Shiny", "Brilliant", "Swift", "Cheerful",
    "Noble", "Alert", "Graceful", "Peaceful", "Proud", "Vivid", "Radiant", "Daring", "Energetic", "Lively",
    "Honest", "Brisk", "Creative", "Braveheart", "Fearless", "Courageous", "Playful", "Curious", "Inventive", "Vigorous",
    "Gallant", "Heroic", "Optimistic", "Cheerful", "Dynamic", "Elegant", "Fierce", "Glorious", "Hopeful", "Intrepid",
    "Jovial", "Keen", "Luminous", "Magnetic", "Passionate", "Resolute", "Serene", "Spirited", "Tenacious", "Valiant",
    "Ambitious", "Astute", "Bubbly", "Charming", "Dazzling", "Eager", "Exuberant", "Fanciful", "Friendly", "Gleaming",
    "Gracious", "Humble", "Imaginative", "Industrious", "Joyful", "Kindhearted", "Majestic", "Meticulous", "Nimble", "Observant",
    "Patient", "Perceptive", "Radiant", "Resourceful", "Sensible", "Sincere", "Sociable", "Stalwart", "Steadfast", "Strong-willed",
    "Talented", "Thoughtful", "Trustworthy", "Upbeat", "Versatile", "Vivacious", "Warmhearted", "Witty", "Zealous", "Zesty",
)

NOUNS = (
    "Tiger", "Eagle", "Moon", "River", "Star", "Cloud", "Stone", "Phoenix", "Shadow", "Lion",
    "Falcon", "Wolf", "Dragon", "Sun", "Mountain", "Ocean", "Sky", "Storm", "Leaf", "Fire",
    "Crystal", "Diamond", "Comet", "Sparrow", "Hawk", "Bear", "Panther", "Cheetah", "Fox", "Raven",
    "Oak", "Pine", "Willow", "Rose", "Lotus", "Orchid", "Daisy", "Maple", "Cedar", "Ivy",
    "Thunder", "Lightning", "Snow", "Rain", "Wind", "Wave", "Canyon", "Valley", "Desert", "Meadow",
    "Horizon", "Galaxy", "Planet", "Meteor", "Nova", "Cosmos", "Aurora", "Orbit", "Tornado", "Volcano",
    "Shadow", "Spirit", "Wolfpack", "Tigerclaw", "Eagleeye", "Nightfall", "Sunrise", "Sunset", "Frost", "Blaze",
    "Echo", "Myst", "Stoneheart", "Iron", "Silver", "Gold", "Bronze", "Obsidian", "Onyx", "Pearl",
    "Sapphire", "Ruby", "Emerald", "Topaz", "Crystal", "Quartz", "Meteorite", "Comet", "Cyclone", "Zephyr",
    "Breeze", "Thunderbolt", "Hurricane", "Avalanche", "Monsoon", "Twilight", "Starlight", "Moonlight", "Daybreak", "Nightshade",
)

SYMBOLS = ("!", "@", "#", "$", "%", "&", "*")

SHORT_NUMBER_RANGE = (10, 99)
LONG_NUMBER_RANGE = (100, 999)


def generate_tokens(rng=None) -> List[str]:
    """Pick the six parts of a passphrase and return them in shuffled order.

    ``rng`` is anything with ``choice``, ``randint`` and ``shuffle`` (a
    ``random.Random`` works); it defaults to ``secrets.SystemRandom()``.
    """
    rng = rng or secrets.SystemRandom()

    tokens = [
        rng.choice(ADJECTIVES),
        rng.choice(NOUNS),
        str(rng.randint(*SHORT_NUMBER_RANGE)),
        str(rng.randint(*LONG_NUMBER_RANGE)),
        rng.choice(SYMBOLS),
        rng.choice(SYMBOLS),
    ]
    rng.shuffle(tokens)
    return tokens


def generate(rng=None) -> str:
    """Generate a memorable password, e.g. ``'42Tiger#Brave517!'`` in some order."""
    password = "".join(generate_tokens(rng))
    logger.debug("Generated passphrase of length %d", len(password))
    return password
