"""artistwall: a progressive multi-source artist image wall.

Loads a listener's top artists, reveals an image tile per artist as it
arrives from iTunes, Discogs or TheAudioDB, and themes the wall with a
colour and headline derived from the artists' moods and genres.
"""

__version__ = "0.1.0"
