"""HTTP integration for fetching remote manifests."""

from ocx.integrations.http.abc import HttpClient as HttpClient
from ocx.integrations.http.fake import FakeHttpClient as FakeHttpClient
from ocx.integrations.http.real import RealHttpClient as RealHttpClient
