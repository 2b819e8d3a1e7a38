"""Word tables for the built-in template headline generator.

Each canonical mood has descriptors ("Joyful") and nouns ("Joy"); each
genre family has generic and specific terms.  Templates marked
``genre_as_adjective`` put the genre term before a noun, so they are only
used with single-word genre terms.
"""

from __future__ import annotations

from typing import NamedTuple

from artistwall.models.personality import GenreFamily, Mood


class HeadlineTemplate(NamedTuple):
    template: str
    genre_as_adjective: bool


class GenreTerms(NamedTuple):
    generic: tuple[str, ...]
    specific: tuple[str, ...]


MOOD_DESCRIPTORS: dict[Mood, tuple[str, ...]] = {
    Mood.HAPPY: (
        "Joyful", "Bright", "Warm", "Uplifted", "Hopeful", "Cheerful", "Lighthearted", "Content",
        "Radiant", "Blissful", "Elated", "Euphoric", "Exuberant", "Jubilant", "Sunlit", "Golden",
    ),
    Mood.SAD: (
        "Sad", "Lonely", "Heartbroken", "Blue", "Grieving", "Hurt", "Lost", "Aching",
        "Melancholic", "Wistful", "Pensive", "Bittersweet", "Longing", "Tender", "Rainy", "Faded",
    ),
    Mood.ANGRY: (
        "Angry", "Fierce", "Defiant", "Rebellious", "Bold", "Intense", "Raw", "Untamed",
        "Furious", "Raging", "Unrelenting", "Unyielding", "Ferocious", "Fiery", "Stormy", "Burning",
    ),
    Mood.RELAXED: (
        "Calm", "Peaceful", "Mellow", "Easy", "Gentle", "Quiet", "Still", "Soft",
        "Serene", "Tranquil", "Soothing", "Placid", "Unhurried", "Graceful", "Moonlit", "Drifting",
    ),
    Mood.ENERGETIC: (
        "Restless", "Driven", "Alive", "Charged", "Fired Up", "Eager", "Tireless", "Unstoppable",
        "Kinetic", "Vibrant", "Electric", "Pulsing", "Relentless", "Dynamic", "Blazing", "Surging",
    ),
    Mood.DARK: (
        "Dark", "Moody", "Brooding", "Haunted", "Somber", "Heavy", "Deep", "Intense",
        "Nocturnal", "Shadowed", "Cryptic", "Mysterious", "Obscure", "Veiled", "Midnight", "Twilight",
    ),
}

MOOD_NOUNS: dict[Mood, tuple[str, ...]] = {
    Mood.HAPPY: ("Joy", "Light", "Warmth", "Hope", "Bliss", "Sunshine", "Radiance", "Delight"),
    Mood.SAD: ("Sorrow", "Longing", "Heartache", "Melancholy", "Rain", "Tears", "Loss", "Ache"),
    Mood.ANGRY: ("Fury", "Fire", "Rage", "Defiance", "Rebellion", "Storm", "Thunder", "Heat"),
    Mood.RELAXED: ("Peace", "Calm", "Stillness", "Serenity", "Quiet", "Ease", "Drift", "Flow"),
    Mood.ENERGETIC: ("Energy", "Motion", "Drive", "Pulse", "Rush", "Fire", "Spark", "Force"),
    Mood.DARK: ("Darkness", "Shadow", "Night", "Mystery", "Depth", "Void", "Dusk", "Gloom"),
}

GENRE_TERMS: dict[GenreFamily, GenreTerms] = {
    GenreFamily.ROCK: GenreTerms(
        ("Rock", "Guitar", "Riff"),
        ("Classic Rock", "Arena Rock", "Power Chord", "Stadium Rock", "Blues Rock"),
    ),
    GenreFamily.ELECTRONIC: GenreTerms(
        ("Electronic", "Synth", "Beat"),
        ("House", "Techno", "Ambient", "Synthwave", "IDM", "Drum & Bass"),
    ),
    GenreFamily.HIP_HOP: GenreTerms(
        ("Hip-Hop", "Rap", "Rhythm"),
        ("Boom Bap", "Golden Era", "Conscious Rap", "Lo-Fi Hip-Hop", "East Coast"),
    ),
    GenreFamily.INDIE: GenreTerms(
        ("Indie", "Alternative", "Underground"),
        ("Shoegaze", "Dream Pop", "Post-Punk", "Jangle Pop", "Lo-Fi Indie"),
    ),
    GenreFamily.POP: GenreTerms(
        ("Pop", "Melody", "Hook"),
        ("Synth-Pop", "Art Pop", "Chamber Pop", "Baroque Pop", "Sophisti-Pop"),
    ),
    GenreFamily.JAZZ: GenreTerms(
        ("Jazz", "Swing", "Improvisation"),
        ("Bebop", "Cool Jazz", "Modal Jazz", "Blue Note", "Hard Bop", "Free Jazz"),
    ),
    GenreFamily.METAL: GenreTerms(
        ("Metal", "Heavy", "Riff"),
        ("Thrash", "Doom", "Black Metal", "Death Metal", "Progressive Metal", "Sludge"),
    ),
    GenreFamily.FOLK: GenreTerms(
        ("Folk", "Acoustic", "Roots"),
        ("Americana", "Bluegrass", "Celtic", "Traditional", "Singer-Songwriter"),
    ),
    GenreFamily.RNB: GenreTerms(
        ("R&B", "Soul", "Groove"),
        ("Neo-Soul", "Motown", "Quiet Storm", "New Jack Swing", "Philly Soul"),
    ),
    GenreFamily.CLASSICAL: GenreTerms(
        ("Classical", "Orchestral", "Symphony"),
        ("Romantic Era", "Baroque", "Chamber Music", "Impressionist", "Minimalist"),
    ),
    GenreFamily.COUNTRY: GenreTerms(
        ("Country", "Twang", "Nashville"),
        ("Outlaw Country", "Honky-Tonk", "Americana", "Bluegrass", "Western Swing"),
    ),
    GenreFamily.ECLECTIC: GenreTerms(
        ("Musical", "Sonic", "Sound"),
        ("Genre-Fluid", "Boundary-Crossing", "Avant-Garde", "Experimental", "Fusion"),
    ),
}

CHARACTERS: tuple[str, ...] = (
    # Romantic / artistic
    "Soul", "Heart", "Spirit", "Dreamer", "Poet", "Romantic", "Artist", "Muse", "Visionary", "Idealist",
    # Seekers
    "Wanderer", "Voyager", "Explorer", "Pilgrim", "Nomad", "Seeker", "Traveler", "Drifter", "Rover",
    # Thinkers
    "Philosopher", "Architect", "Scholar", "Chronicler", "Mystic", "Thinker", "Observer", "Curator",
    # Outsiders
    "Rebel", "Outsider", "Maverick", "Loner", "Outcast",
)

SHORT_TEMPLATES: tuple[HeadlineTemplate, ...] = (
    HeadlineTemplate("{mood} {genre} {character}", True),
    HeadlineTemplate("{mood} {genre} Soul", True),
    HeadlineTemplate("{genre} {character}", True),
    HeadlineTemplate("{genre} Heart", True),
    HeadlineTemplate("Born {genre} {character}", True),
    HeadlineTemplate("True {genre} {character}", True),
    HeadlineTemplate("The {genre} {character}", True),
    HeadlineTemplate("A {genre} {character}", True),
    HeadlineTemplate("The {mood} {character}", False),
    HeadlineTemplate("{mood} {character}", False),
    HeadlineTemplate("A {mood} {character}", False),
    HeadlineTemplate("{mood} to the Core", False),
    HeadlineTemplate("{mood} and {genre}", False),
    HeadlineTemplate("Forever {genre}", False),
    HeadlineTemplate("Deeply {genre}", False),
    HeadlineTemplate("{genre} at Heart", False),
)

MEDIUM_TEMPLATES: tuple[HeadlineTemplate, ...] = (
    HeadlineTemplate("A {mood} {genre} {character} at Heart", True),
    HeadlineTemplate("{character} of the {mood} {genre} Sound", True),
    HeadlineTemplate("The {mood} {genre} {character}", True),
    HeadlineTemplate("The Enduring {genre} {character}", True),
    HeadlineTemplate("Devoted {genre} {character}", True),
    HeadlineTemplate("A True {genre} {character}", True),
    HeadlineTemplate("Born a {mood} {genre} {character}", True),
    HeadlineTemplate("{genre} Flows Through This {character}", True),
    HeadlineTemplate("{mood} {genre} Through and Through", True),
    HeadlineTemplate("A {character} Drawn to {mood} {genre}", False),
    HeadlineTemplate("Where {moodNoun} Meets {genre}", False),
    HeadlineTemplate("The {mood} {character} of {genre}", False),
    HeadlineTemplate("A {mood} {character} in a {genre} World", False),
    HeadlineTemplate("Living for {mood} {genre}", False),
    HeadlineTemplate("Lost in {mood} {genre}", False),
    HeadlineTemplate("The {character} Who Found {genre}", False),
    HeadlineTemplate("A {character} Shaped by {genre}", False),
    HeadlineTemplate("Defined by {mood} {genre}", False),
    HeadlineTemplate("The {mood} Side of {genre}", False),
    HeadlineTemplate("A {character} at Home in {genre}", False),
    HeadlineTemplate("Rooted in {mood} {genre}", False),
)

# Words starting with a vowel letter but a consonant sound, and vice versa.
CONSONANT_SOUNDING_VOWELS: tuple[str, ...] = (
    "unique", "universal", "university", "unicorn", "uniform", "union", "united", "unity",
    "use", "used", "useful", "user", "usual", "usually", "utopia",
    "euphoric", "euphoria", "european", "one", "once",
)
VOWEL_SOUNDING_CONSONANTS: tuple[str, ...] = ("honest", "honor", "honour", "hour", "heir")
