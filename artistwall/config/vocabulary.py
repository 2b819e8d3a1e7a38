"""Static vocabulary tables for personality aggregation.

# ─── PURPOSE ───────────────────────────────────────────────────────────
#
# TheAudioDB reports free-form mood, genre and style strings.  These
# tables fold that vocabulary into the canonical sets the colour blender
# and headline service understand:
#
#   - MOOD_MAP           raw mood term   -> one of 6 canonical moods
#   - GENRE_FAMILY_MAP   raw genre/style -> one of 11 genre families
#   - MOOD_COLOR_RANGES  canonical mood  -> hue/saturation/lightness range
#
# Keys are lowercase; callers lowercase and strip before looking up.
# Terms not listed here carry no signal.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from artistwall.models.personality import ColorRange, GenreFamily, Mood


# ═════════════════════════════════════════════════════════════════════════
# 1. GENRE FAMILY MAP
# ═════════════════════════════════════════════════════════════════════════

GENRE_FAMILY_MAP: dict[str, GenreFamily] = {
    # Rock family
    "rock": GenreFamily.ROCK,
    "alternative rock": GenreFamily.ROCK,
    "indie rock": GenreFamily.INDIE,
    "punk rock": GenreFamily.ROCK,
    "punk": GenreFamily.ROCK,
    "hard rock": GenreFamily.ROCK,
    "classic rock": GenreFamily.ROCK,
    "progressive rock": GenreFamily.ROCK,
    "prog rock": GenreFamily.ROCK,
    "psychedelic rock": GenreFamily.ROCK,
    "garage rock": GenreFamily.ROCK,
    "grunge": GenreFamily.ROCK,
    "post-rock": GenreFamily.ROCK,
    "post rock": GenreFamily.ROCK,
    "art rock": GenreFamily.ROCK,
    "glam rock": GenreFamily.ROCK,
    "blues rock": GenreFamily.ROCK,
    "southern rock": GenreFamily.ROCK,
    "stoner rock": GenreFamily.ROCK,
    "noise rock": GenreFamily.INDIE,
    "shoegaze": GenreFamily.INDIE,
    "dream pop": GenreFamily.INDIE,
    "britpop": GenreFamily.ROCK,
    "new wave": GenreFamily.ROCK,
    "post-punk": GenreFamily.INDIE,
    "post punk": GenreFamily.INDIE,
    "gothic rock": GenreFamily.ROCK,
    "emo": GenreFamily.ROCK,
    "screamo": GenreFamily.ROCK,
    "pop punk": GenreFamily.ROCK,
    "ska punk": GenreFamily.ROCK,
    "hardcore": GenreFamily.ROCK,
    "hardcore punk": GenreFamily.ROCK,
    "post-hardcore": GenreFamily.ROCK,

    # Electronic family
    "electronic": GenreFamily.ELECTRONIC,
    "electronica": GenreFamily.ELECTRONIC,
    "edm": GenreFamily.ELECTRONIC,
    "house": GenreFamily.ELECTRONIC,
    "deep house": GenreFamily.ELECTRONIC,
    "tech house": GenreFamily.ELECTRONIC,
    "progressive house": GenreFamily.ELECTRONIC,
    "techno": GenreFamily.ELECTRONIC,
    "trance": GenreFamily.ELECTRONIC,
    "psytrance": GenreFamily.ELECTRONIC,
    "drum and bass": GenreFamily.ELECTRONIC,
    "dnb": GenreFamily.ELECTRONIC,
    "dubstep": GenreFamily.ELECTRONIC,
    "ambient": GenreFamily.ELECTRONIC,
    "idm": GenreFamily.ELECTRONIC,
    "downtempo": GenreFamily.ELECTRONIC,
    "chillout": GenreFamily.ELECTRONIC,
    "trip hop": GenreFamily.ELECTRONIC,
    "trip-hop": GenreFamily.ELECTRONIC,
    "breakbeat": GenreFamily.ELECTRONIC,
    "jungle": GenreFamily.ELECTRONIC,
    "garage": GenreFamily.ELECTRONIC,
    "uk garage": GenreFamily.ELECTRONIC,
    "synthwave": GenreFamily.ELECTRONIC,
    "synthpop": GenreFamily.ELECTRONIC,
    "synth-pop": GenreFamily.ELECTRONIC,
    "electropop": GenreFamily.ELECTRONIC,
    "industrial": GenreFamily.ELECTRONIC,
    "ebm": GenreFamily.ELECTRONIC,
    "darkwave": GenreFamily.ELECTRONIC,
    "vaporwave": GenreFamily.ELECTRONIC,
    "future bass": GenreFamily.ELECTRONIC,
    "lo-fi": GenreFamily.ELECTRONIC,
    "lofi": GenreFamily.ELECTRONIC,

    # Hip-hop family
    "hip hop": GenreFamily.HIP_HOP,
    "hip-hop": GenreFamily.HIP_HOP,
    "rap": GenreFamily.HIP_HOP,
    "trap": GenreFamily.HIP_HOP,
    "gangsta rap": GenreFamily.HIP_HOP,
    "conscious hip hop": GenreFamily.HIP_HOP,
    "underground hip hop": GenreFamily.HIP_HOP,
    "alternative hip hop": GenreFamily.HIP_HOP,
    "boom bap": GenreFamily.HIP_HOP,
    "east coast hip hop": GenreFamily.HIP_HOP,
    "west coast hip hop": GenreFamily.HIP_HOP,
    "southern hip hop": GenreFamily.HIP_HOP,
    "dirty south": GenreFamily.HIP_HOP,
    "crunk": GenreFamily.HIP_HOP,
    "grime": GenreFamily.HIP_HOP,
    "drill": GenreFamily.HIP_HOP,
    "cloud rap": GenreFamily.HIP_HOP,
    "mumble rap": GenreFamily.HIP_HOP,
    "emo rap": GenreFamily.HIP_HOP,

    # Indie/Alternative family
    "indie": GenreFamily.INDIE,
    "indie pop": GenreFamily.INDIE,
    "indie folk": GenreFamily.FOLK,
    "alternative": GenreFamily.INDIE,
    "lo-fi indie": GenreFamily.INDIE,
    "chamber pop": GenreFamily.INDIE,
    "baroque pop": GenreFamily.INDIE,
    "art pop": GenreFamily.INDIE,
    "experimental": GenreFamily.INDIE,
    "avant-garde": GenreFamily.INDIE,
    "math rock": GenreFamily.INDIE,
    "midwest emo": GenreFamily.INDIE,
    "slowcore": GenreFamily.INDIE,
    "sadcore": GenreFamily.INDIE,

    # Pop family
    "pop": GenreFamily.POP,
    "dance pop": GenreFamily.POP,
    "teen pop": GenreFamily.POP,
    "power pop": GenreFamily.POP,
    "adult contemporary": GenreFamily.POP,
    "soft rock": GenreFamily.POP,
    "bubblegum pop": GenreFamily.POP,
    "k-pop": GenreFamily.POP,
    "j-pop": GenreFamily.POP,
    "c-pop": GenreFamily.POP,
    "latin pop": GenreFamily.POP,
    "europop": GenreFamily.POP,
    "disco": GenreFamily.POP,
    "funk": GenreFamily.RNB,

    # Jazz family
    "jazz": GenreFamily.JAZZ,
    "smooth jazz": GenreFamily.JAZZ,
    "acid jazz": GenreFamily.JAZZ,
    "jazz fusion": GenreFamily.JAZZ,
    "bebop": GenreFamily.JAZZ,
    "hard bop": GenreFamily.JAZZ,
    "cool jazz": GenreFamily.JAZZ,
    "free jazz": GenreFamily.JAZZ,
    "modal jazz": GenreFamily.JAZZ,
    "swing": GenreFamily.JAZZ,
    "big band": GenreFamily.JAZZ,
    "latin jazz": GenreFamily.JAZZ,
    "bossa nova": GenreFamily.JAZZ,
    "nu jazz": GenreFamily.JAZZ,

    # Metal family
    "metal": GenreFamily.METAL,
    "heavy metal": GenreFamily.METAL,
    "thrash metal": GenreFamily.METAL,
    "death metal": GenreFamily.METAL,
    "black metal": GenreFamily.METAL,
    "doom metal": GenreFamily.METAL,
    "power metal": GenreFamily.METAL,
    "progressive metal": GenreFamily.METAL,
    "prog metal": GenreFamily.METAL,
    "symphonic metal": GenreFamily.METAL,
    "folk metal": GenreFamily.METAL,
    "viking metal": GenreFamily.METAL,
    "gothic metal": GenreFamily.METAL,
    "nu metal": GenreFamily.METAL,
    "metalcore": GenreFamily.METAL,
    "deathcore": GenreFamily.METAL,
    "djent": GenreFamily.METAL,
    "sludge metal": GenreFamily.METAL,
    "stoner metal": GenreFamily.METAL,
    "groove metal": GenreFamily.METAL,
    "speed metal": GenreFamily.METAL,
    "grindcore": GenreFamily.METAL,

    # Folk family
    "folk": GenreFamily.FOLK,
    "folk rock": GenreFamily.FOLK,
    "americana": GenreFamily.FOLK,
    "bluegrass": GenreFamily.FOLK,
    "country folk": GenreFamily.FOLK,
    "celtic": GenreFamily.FOLK,
    "irish folk": GenreFamily.FOLK,
    "scottish folk": GenreFamily.FOLK,
    "traditional folk": GenreFamily.FOLK,
    "contemporary folk": GenreFamily.FOLK,
    "singer-songwriter": GenreFamily.FOLK,
    "acoustic": GenreFamily.FOLK,
    "neofolk": GenreFamily.FOLK,
    "freak folk": GenreFamily.FOLK,
    "anti-folk": GenreFamily.FOLK,
    "world music": GenreFamily.FOLK,

    # R&B/Soul family
    "r&b": GenreFamily.RNB,
    "rnb": GenreFamily.RNB,
    "rhythm and blues": GenreFamily.RNB,
    "soul": GenreFamily.RNB,
    "neo soul": GenreFamily.RNB,
    "neo-soul": GenreFamily.RNB,
    "motown": GenreFamily.RNB,
    "contemporary r&b": GenreFamily.RNB,
    "quiet storm": GenreFamily.RNB,
    "new jack swing": GenreFamily.RNB,
    "gospel": GenreFamily.RNB,
    "blues": GenreFamily.RNB,

    # Classical family
    "classical": GenreFamily.CLASSICAL,
    "orchestra": GenreFamily.CLASSICAL,
    "orchestral": GenreFamily.CLASSICAL,
    "symphony": GenreFamily.CLASSICAL,
    "chamber music": GenreFamily.CLASSICAL,
    "opera": GenreFamily.CLASSICAL,
    "baroque": GenreFamily.CLASSICAL,
    "romantic": GenreFamily.CLASSICAL,
    "contemporary classical": GenreFamily.CLASSICAL,
    "minimalism": GenreFamily.CLASSICAL,
    "neoclassical": GenreFamily.CLASSICAL,
    "impressionist": GenreFamily.CLASSICAL,

    # Country family
    "country": GenreFamily.COUNTRY,
    "country rock": GenreFamily.COUNTRY,
    "alt-country": GenreFamily.COUNTRY,
    "outlaw country": GenreFamily.COUNTRY,
    "country pop": GenreFamily.COUNTRY,
    "honky tonk": GenreFamily.COUNTRY,
    "western": GenreFamily.COUNTRY,
    "nashville sound": GenreFamily.COUNTRY,
    "bro-country": GenreFamily.COUNTRY,
    "texas country": GenreFamily.COUNTRY,
    "red dirt": GenreFamily.COUNTRY,
}


# ═════════════════════════════════════════════════════════════════════════
# 2. MOOD MAP
# ═════════════════════════════════════════════════════════════════════════

MOOD_MAP: dict[str, Mood] = {
    # Happy family
    "happy": Mood.HAPPY,
    "joyful": Mood.HAPPY,
    "cheerful": Mood.HAPPY,
    "uplifting": Mood.HAPPY,
    "upbeat": Mood.HAPPY,
    "euphoric": Mood.HAPPY,
    "elated": Mood.HAPPY,
    "optimistic": Mood.HAPPY,
    "playful": Mood.HAPPY,
    "fun": Mood.HAPPY,
    "celebratory": Mood.HAPPY,
    "triumphant": Mood.HAPPY,
    "bright": Mood.HAPPY,
    "sunny": Mood.HAPPY,
    "positive": Mood.HAPPY,
    "exuberant": Mood.HAPPY,
    "gleeful": Mood.HAPPY,
    "blissful": Mood.HAPPY,

    # Sad family
    "sad": Mood.SAD,
    "melancholic": Mood.SAD,
    "melancholy": Mood.SAD,
    "sorrowful": Mood.SAD,
    "mournful": Mood.SAD,
    "heartbroken": Mood.SAD,
    "lonely": Mood.SAD,
    "longing": Mood.SAD,
    "wistful": Mood.SAD,
    "bittersweet": Mood.SAD,
    "nostalgic": Mood.SAD,
    "reflective": Mood.SAD,
    "yearning": Mood.SAD,
    "grieving": Mood.SAD,
    "depressed": Mood.SAD,
    "blue": Mood.SAD,
    "pensive": Mood.SAD,
    "tender": Mood.SAD,

    # Angry family
    "angry": Mood.ANGRY,
    "aggressive": Mood.ANGRY,
    "intense": Mood.ANGRY,
    "fierce": Mood.ANGRY,
    "furious": Mood.ANGRY,
    "rebellious": Mood.ANGRY,
    "defiant": Mood.ANGRY,
    "confrontational": Mood.ANGRY,
    "hostile": Mood.ANGRY,
    "violent": Mood.ANGRY,
    "rage": Mood.ANGRY,
    "raging": Mood.ANGRY,
    "hateful": Mood.ANGRY,
    "bitter": Mood.ANGRY,
    "raw": Mood.ANGRY,
    "brutal": Mood.ANGRY,

    # Relaxed family
    "relaxed": Mood.RELAXED,
    "calm": Mood.RELAXED,
    "peaceful": Mood.RELAXED,
    "serene": Mood.RELAXED,
    "tranquil": Mood.RELAXED,
    "mellow": Mood.RELAXED,
    "soothing": Mood.RELAXED,
    "gentle": Mood.RELAXED,
    "soft": Mood.RELAXED,
    "easy": Mood.RELAXED,
    "laid-back": Mood.RELAXED,
    "chill": Mood.RELAXED,
    "ambient": Mood.RELAXED,
    "quiet": Mood.RELAXED,
    "dreamy": Mood.RELAXED,
    "ethereal": Mood.RELAXED,
    "meditative": Mood.RELAXED,
    "contemplative": Mood.RELAXED,

    # Energetic family
    "energetic": Mood.ENERGETIC,
    "exciting": Mood.ENERGETIC,
    "dynamic": Mood.ENERGETIC,
    "powerful": Mood.ENERGETIC,
    "driving": Mood.ENERGETIC,
    "pumping": Mood.ENERGETIC,
    "electric": Mood.ENERGETIC,
    "vibrant": Mood.ENERGETIC,
    "lively": Mood.ENERGETIC,
    "spirited": Mood.ENERGETIC,
    "passionate": Mood.ENERGETIC,
    "fiery": Mood.ENERGETIC,
    "wild": Mood.ENERGETIC,
    "hyper": Mood.ENERGETIC,
    "thrilling": Mood.ENERGETIC,
    "exhilarating": Mood.ENERGETIC,
    "urgent": Mood.ENERGETIC,
    "restless": Mood.ENERGETIC,

    # Dark family
    "dark": Mood.DARK,
    "brooding": Mood.DARK,
    "moody": Mood.DARK,
    "mysterious": Mood.DARK,
    "haunting": Mood.DARK,
    "eerie": Mood.DARK,
    "ominous": Mood.DARK,
    "sinister": Mood.DARK,
    "gothic": Mood.DARK,
    "somber": Mood.DARK,
    "gloomy": Mood.DARK,
    "bleak": Mood.DARK,
    "atmospheric": Mood.DARK,
    "shadowy": Mood.DARK,
    "nocturnal": Mood.DARK,
    "cryptic": Mood.DARK,
    "foreboding": Mood.DARK,
    "menacing": Mood.DARK,
}


# ═════════════════════════════════════════════════════════════════════════
# 3. MOOD COLOUR RANGES
# ═════════════════════════════════════════════════════════════════════════
# Background lightness stays between 12 and 32 so white overlay text keeps
# its contrast.  ANGRY wraps through red: 390 is 30 degrees.

MOOD_COLOR_RANGES: dict[Mood, ColorRange] = {
    # Warm yellows, oranges, bright greens
    Mood.HAPPY: ColorRange(hue_min=30, hue_max=120, sat_min=60, sat_max=85, light_min=22, light_max=32),
    # Cool blues, blue-purples
    Mood.SAD: ColorRange(hue_min=200, hue_max=260, sat_min=40, sat_max=70, light_min=18, light_max=28),
    # Reds, deep oranges
    Mood.ANGRY: ColorRange(hue_min=340, hue_max=390, sat_min=65, sat_max=90, light_min=20, light_max=30),
    # Soft greens, teals
    Mood.RELAXED: ColorRange(hue_min=140, hue_max=200, sat_min=35, sat_max=65, light_min=20, light_max=30),
    # Magentas, hot pinks, electric purples
    Mood.ENERGETIC: ColorRange(hue_min=280, hue_max=340, sat_min=70, sat_max=95, light_min=22, light_max=32),
    # Deep purples, dark blues
    Mood.DARK: ColorRange(hue_min=240, hue_max=300, sat_min=30, sat_max=60, light_min=12, light_max=22),
}


def normalize_mood(raw: str | None) -> Mood | None:
    """Map a raw mood term to its canonical mood, or None."""
    if not raw:
        return None
    return MOOD_MAP.get(raw.strip().lower())


def normalize_genre(raw: str | None) -> GenreFamily | None:
    """Map a raw genre or style term to its genre family, or None."""
    if not raw:
        return None
    return GENRE_FAMILY_MAP.get(raw.strip().lower())
