"""Canonical identity resolution for artists.

Turns an artist name (plus the MBID the top-artists source may already
know) into ``MetadataResult(mbid, discogs_id)``:

    1. No known MBID → name search; accept the top hit only when its name
       equals the query case-insensitively.  Anything else means no MBID,
       since showing no image beats showing a different artist's.
    2. MBID → lookup with url relations.  If the looked-up name disagrees
       with the query (upstream sometimes hands out a wrong MBID), the
       whole result is discarded.  Otherwise the first ``discogs``
       relation whose URL matches ``discogs.com/artist/<digits>`` supplies
       the Discogs id.
    3. Failures degrade: a failed search gives an empty result, a failed
       lookup keeps the MBID without a Discogs id.

``resolve`` never raises.
"""

from __future__ import annotations

import re
from typing import Iterable

from artistwall.interfaces.metadata_provider import ArtistRelation, IMetadataProvider
from artistwall.models.artist import MetadataResult
from artistwall.utils.errors import ArtistWallError, IdentityMismatchError, RateLimitError
from artistwall.utils.logging import get_logger

_DISCOGS_ARTIST_RE = re.compile(r"discogs\.com/artist/(\d+)")


def extract_discogs_id(relations: Iterable[ArtistRelation]) -> str | None:
    """Return the numeric Discogs artist id from the first matching relation."""
    for relation in relations:
        if relation.type != "discogs" or not relation.url:
            continue
        match = _DISCOGS_ARTIST_RE.search(relation.url)
        if match:
            return match.group(1)
    return None


def names_match(query: str, found: str | None) -> bool:
    """Case-insensitive exact name comparison used for identity checks."""
    return bool(found) and found.lower() == query.lower()  # type: ignore[union-attr]


class MetadataResolver:
    """Resolves artists to MBID + Discogs id through an IMetadataProvider."""

    def __init__(self, provider: IMetadataProvider) -> None:
        self._provider = provider
        self._logger = get_logger(__name__)

    async def resolve(self, artist_name: str, known_mbid: str | None = None) -> MetadataResult:
        mbid = known_mbid or None

        if not mbid:
            mbid = await self._search(artist_name)
        if not mbid:
            return MetadataResult()

        try:
            lookup = await self._provider.lookup_artist(mbid)
        except ArtistWallError as exc:
            self._logger.warning(
                "metadata_lookup_failed",
                artist=artist_name,
                mbid=mbid,
                rate_limited=isinstance(exc, RateLimitError),
                error=str(exc),
            )
            return MetadataResult(mbid=mbid)

        if lookup is None:
            return MetadataResult(mbid=mbid)

        if lookup.name and not names_match(artist_name, lookup.name):
            mismatch = IdentityMismatchError(
                message=f"MBID {mbid} belongs to '{lookup.name}', not '{artist_name}'",
                provider_name=self._provider.get_provider_name(),
            )
            self._logger.info("metadata_identity_mismatch", artist=artist_name, detail=str(mismatch))
            return MetadataResult()

        discogs_id = extract_discogs_id(lookup.relations)
        self._logger.debug(
            "metadata_resolved",
            artist=artist_name,
            mbid=mbid,
            discogs_id=discogs_id,
        )
        return MetadataResult(mbid=mbid, discogs_id=discogs_id)

    async def _search(self, artist_name: str) -> str | None:
        try:
            hit = await self._provider.search_artist(artist_name)
        except ArtistWallError as exc:
            self._logger.warning(
                "metadata_search_failed",
                artist=artist_name,
                rate_limited=isinstance(exc, RateLimitError),
                error=str(exc),
            )
            return None

        if hit is None:
            return None
        if not names_match(artist_name, hit.name):
            self._logger.debug("metadata_search_mismatch", artist=artist_name, found=hit.name)
            return None
        return hit.id
