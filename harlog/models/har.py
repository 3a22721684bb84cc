"""HAR (HTTP Archive) format models — W3C HAR 1.2 spec."""

from __future__ import annotations

from pydantic import ConfigDict, Field, StrictBool, StrictInt, StrictStr

from harlog import __version__
from harlog.models.base import ByteSize, HARModel
from harlog.models.cache import Cache
from harlog.models.timing import PageTimings, Timing
from harlog.models.types import CREATOR_NAME, HAR_VERSION


class Header(HARModel):
    name: StrictStr
    value: StrictStr
    comment: StrictStr | None = None


class QueryStringPair(HARModel):
    name: StrictStr
    value: StrictStr
    comment: StrictStr | None = None


class Cookie(HARModel):
    name: StrictStr
    value: StrictStr
    path: StrictStr | None = None
    domain: StrictStr | None = None
    expires: StrictStr | None = None
    http_only: StrictBool | None = None
    secure: StrictBool | None = None
    comment: StrictStr | None = None


class Param(HARModel):
    """A posted parameter, or a posted file when ``file_name`` is set."""

    name: StrictStr
    value: StrictStr | None = None
    file_name: StrictStr | None = None
    content_type: StrictStr | None = None
    comment: StrictStr | None = None


class PostData(HARModel):
    mime_type: StrictStr
    params: list[Param] = Field(default_factory=list)
    text: StrictStr
    comment: StrictStr | None = None


class Content(HARModel):
    """Response body details.

    ``text`` is left out when the body was not captured. When ``encoding`` is
    set (e.g. ``"base64"``) the text is an encoded form of the body rather
    than the decoded characters.
    """

    size: StrictInt
    compression: StrictInt | None = None
    mime_type: StrictStr
    text: StrictStr | None = None
    encoding: StrictStr | None = None
    comment: StrictStr | None = None


class Request(HARModel):
    method: StrictStr
    url: StrictStr
    http_version: StrictStr
    cookies: list[Cookie] = Field(default_factory=list)
    headers: list[Header] = Field(default_factory=list)
    query_string: list[QueryStringPair] = Field(default_factory=list)
    post_data: PostData | None = None
    headers_size: ByteSize = None
    body_size: ByteSize = None
    comment: StrictStr | None = None


class Response(HARModel):
    status: StrictInt
    status_text: StrictStr
    http_version: StrictStr
    cookies: list[Cookie] = Field(default_factory=list)
    headers: list[Header] = Field(default_factory=list)
    content: Content
    redirect_url: StrictStr = Field(alias="redirectURL")
    headers_size: ByteSize = None
    body_size: ByteSize = None
    comment: StrictStr | None = None


class Entry(HARModel):
    """One request/response round trip.

    HAR's ``entry.time`` is not stored; it is derived from ``timings``.
    """

    pageref: StrictStr | None = None
    started_date_time: StrictStr
    request: Request
    response: Response
    cache: Cache
    timings: Timing
    server_ip_address: StrictStr | None = Field(default=None, alias="serverIPAddress")
    connection: StrictStr | None = None
    comment: StrictStr | None = None

    @property
    def total_time(self) -> int | float:
        return self.timings.total()


class Creator(HARModel):
    name: StrictStr
    version: StrictStr
    comment: StrictStr | None = None


class Browser(HARModel):
    name: StrictStr
    version: StrictStr
    comment: StrictStr | None = None

    @classmethod
    def new(cls, name: str, version: str, comment: str | None = None) -> Browser:
        return cls(name=name, version=version, comment=comment)


class Page(HARModel):
    started_date_time: StrictStr
    id: StrictStr
    title: StrictStr
    page_timings: PageTimings
    comment: StrictStr | None = None

    @classmethod
    def new(
        cls,
        started_date_time: str,
        id: str,
        title: str,
        page_timings: PageTimings,
        comment: str | None = None,
    ) -> Page:
        return cls(
            started_date_time=started_date_time,
            id=id,
            title=title,
            page_timings=page_timings,
            comment=comment,
        )


class Log(HARModel):
    """Root of a HAR document (the object under the ``log`` key).

    ``pages`` stays ``None`` until the first page is added, so a log without
    pages never encodes an empty ``pages`` array.
    """

    model_config = ConfigDict(frozen=False)

    version: StrictStr
    creator: Creator
    browser: Browser | None = None
    pages: list[Page] | None = None
    entries: list[Entry] = Field(default_factory=list)
    comment: StrictStr | None = None

    @classmethod
    def new(cls, browser: Browser | None = None, comment: str | None = None) -> Log:
        return cls(
            version=HAR_VERSION,
            creator=Creator(name=CREATOR_NAME, version=__version__),
            browser=browser,
            comment=comment,
        )

    def add_page(self, page: Page) -> None:
        if self.pages is None:
            self.pages = [page]
        else:
            self.pages.append(page)

    def add_entry(self, entry: Entry) -> None:
        self.entries.append(entry)
