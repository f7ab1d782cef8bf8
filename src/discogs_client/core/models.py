"""Pydantic models for Discogs API responses.

Field names follow the JSON keys Discogs returns. Unknown keys are ignored so
new API fields never break decoding.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DiscogsModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


# Shared building blocks


class PageURLs(DiscogsModel):
    first: str | None = None
    prev: str | None = None
    next: str | None = None
    last: str | None = None


class Page(DiscogsModel):
    """Pagination block of list responses."""

    page: int
    pages: int
    per_page: int
    items: int
    urls: PageURLs = Field(default_factory=PageURLs)


class Image(DiscogsModel):
    type: str = ""
    uri: str = ""
    uri150: str = ""
    resource_url: str = ""
    width: int = 0
    height: int = 0


class Video(DiscogsModel):
    uri: str = ""
    title: str = ""
    description: str = ""
    duration: int = 0
    embed: bool = False


class ArtistSource(DiscogsModel):
    """An artist credit as it appears on releases, masters and tracks."""

    id: int
    name: str
    anv: str = ""
    join: str = ""
    role: str = ""
    tracks: str = ""
    resource_url: str = ""


class Track(DiscogsModel):
    position: str = ""
    type_: str = ""
    title: str = ""
    duration: str = ""
    artists: list[ArtistSource] = Field(default_factory=list)
    extraartists: list[ArtistSource] = Field(default_factory=list)


# Releases


class Contributor(DiscogsModel):
    username: str = ""
    resource_url: str = ""


class Rating(DiscogsModel):
    count: int = 0
    average: float = 0.0


class Community(DiscogsModel):
    contributors: list[Contributor] = Field(default_factory=list)
    data_quality: str = ""
    have: int = 0
    want: int = 0
    rating: Rating = Field(default_factory=Rating)
    status: str = ""
    submitter: Contributor | None = None


class Company(DiscogsModel):
    id: int
    name: str
    catno: str = ""
    entity_type: str = ""
    entity_type_name: str = ""
    resource_url: str = ""


class Format(DiscogsModel):
    name: str
    qty: str = ""
    text: str = ""
    descriptions: list[str] = Field(default_factory=list)


class Identifier(DiscogsModel):
    type: str
    value: str
    description: str = ""


class LabelSource(DiscogsModel):
    """A label credit on a release."""

    id: int
    name: str
    catno: str = ""
    entity_type: str = ""
    resource_url: str = ""


class Series(DiscogsModel):
    id: int
    name: str
    catno: str = ""
    entity_type: str = ""
    entity_type_name: str = ""
    resource_url: str = ""
    thumbnail_url: str = ""


class Release(DiscogsModel):
    id: int
    title: str
    status: str = ""
    year: int = 0
    uri: str = ""
    resource_url: str = ""
    artists: list[ArtistSource] = Field(default_factory=list)
    artists_sort: str = ""
    extraartists: list[ArtistSource] = Field(default_factory=list)
    data_quality: str = ""
    thumb: str = ""
    community: Community = Field(default_factory=Community)
    companies: list[Company] = Field(default_factory=list)
    country: str = ""
    date_added: str = ""
    date_changed: str = ""
    estimated_weight: int | None = None
    format_quantity: int = 0
    formats: list[Format] = Field(default_factory=list)
    genres: list[str] = Field(default_factory=list)
    styles: list[str] = Field(default_factory=list)
    identifiers: list[Identifier] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)
    labels: list[LabelSource] = Field(default_factory=list)
    series: list[Series] = Field(default_factory=list)
    lowest_price: float | None = None
    num_for_sale: int = 0
    master_id: int = 0
    master_url: str = ""
    notes: str = ""
    released: str = ""
    released_formatted: str = ""
    tracklist: list[Track] = Field(default_factory=list)
    videos: list[Video] = Field(default_factory=list)


class CommunityReleaseRating(DiscogsModel):
    release_id: int
    rating: Rating


class UserReleaseRating(DiscogsModel):
    release_id: int
    username: str
    rating: int


# Masters


class Master(DiscogsModel):
    id: int
    title: str
    main_release: int = 0
    main_release_url: str = ""
    versions_url: str = ""
    uri: str = ""
    resource_url: str = ""
    year: int = 0
    artists: list[ArtistSource] = Field(default_factory=list)
    genres: list[str] = Field(default_factory=list)
    styles: list[str] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)
    tracklist: list[Track] = Field(default_factory=list)
    videos: list[Video] = Field(default_factory=list)
    num_for_sale: int = 0
    lowest_price: float | None = None
    data_quality: str = ""


class Version(DiscogsModel):
    id: int
    title: str
    status: str = ""
    thumb: str = ""
    format: str = ""
    country: str = ""
    label: str = ""
    released: str = ""
    catno: str = ""
    major_formats: list[str] = Field(default_factory=list)
    resource_url: str = ""


class MasterVersions(DiscogsModel):
    pagination: Page
    versions: list[Version] = Field(default_factory=list)


# Artists


class Member(DiscogsModel):
    id: int
    name: str
    active: bool = False
    resource_url: str = ""


class Alias(DiscogsModel):
    id: int
    name: str
    resource_url: str = ""


class Artist(DiscogsModel):
    id: int
    name: str
    realname: str = ""
    profile: str = ""
    members: list[Member] = Field(default_factory=list)
    groups: list[Member] = Field(default_factory=list)
    aliases: list[Alias] = Field(default_factory=list)
    namevariations: list[str] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)
    urls: list[str] = Field(default_factory=list)
    uri: str = ""
    resource_url: str = ""
    releases_url: str = ""
    data_quality: str = ""


class ReleaseSource(DiscogsModel):
    """A release or master listed under an artist or label."""

    id: int
    title: str
    type: str = ""
    main_release: int = 0
    artist: str = ""
    role: str = ""
    format: str = ""
    label: str = ""
    catno: str = ""
    status: str = ""
    thumb: str = ""
    year: int = 0
    resource_url: str = ""


class ArtistReleases(DiscogsModel):
    pagination: Page
    releases: list[ReleaseSource] = Field(default_factory=list)


# Labels


class Sublabel(DiscogsModel):
    id: int
    name: str
    resource_url: str = ""


class Label(DiscogsModel):
    id: int
    name: str
    profile: str = ""
    contact_info: str = ""
    parent_label: Sublabel | None = None
    sublabels: list[Sublabel] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)
    urls: list[str] = Field(default_factory=list)
    uri: str = ""
    resource_url: str = ""
    releases_url: str = ""
    data_quality: str = ""


class LabelReleases(DiscogsModel):
    pagination: Page
    releases: list[ReleaseSource] = Field(default_factory=list)


# Search


class SearchCommunity(DiscogsModel):
    have: int = 0
    want: int = 0


class SearchResult(DiscogsModel):
    id: int
    type: str
    title: str
    thumb: str = ""
    cover_image: str = ""
    uri: str = ""
    resource_url: str = ""
    country: str = ""
    year: str = ""
    catno: str = ""
    barcode: list[str] = Field(default_factory=list)
    format: list[str] = Field(default_factory=list)
    label: list[str] = Field(default_factory=list)
    genre: list[str] = Field(default_factory=list)
    style: list[str] = Field(default_factory=list)
    master_id: int | None = None
    community: SearchCommunity = Field(default_factory=SearchCommunity)


class Search(DiscogsModel):
    pagination: Page
    results: list[SearchResult] = Field(default_factory=list)
