import json

import httplib2
import pytest
from googleapiclient.errors import HttpError

from report_pipeline.core.config import AppConfig


def make_http_error(status=403, reason="quotaExceeded"):
    """Builds the error googleapiclient raises for a non-success response."""
    resp = httplib2.Response({"status": status, "reason": reason})
    return HttpError(resp, b'{"error": {"message": "' + reason.encode() + b'"}}')


def search_video_item(video_id, title):
    return {"id": {"kind": "youtube#video", "videoId": video_id}, "snippet": {"title": title}}


def video_detail_item(video_id, title, views, published_at="2015-01-01T00:00:00Z"):
    return {
        "id": video_id,
        "snippet": {"title": title, "publishedAt": published_at},
        "statistics": {"viewCount": views},
    }


@pytest.fixture
def channel_search_response():
    return {
        "items": [
            {
                "id": {"kind": "youtube#channel", "channelId": "UCletsplay0000000000000a"},
                "snippet": {"channelId": "UCsnippet00000000000000a", "title": "Let's Play"},
            },
            {
                "id": {"kind": "youtube#channel", "channelId": "UCother000000000000000000"},
                "snippet": {"title": "Let's Play Too"},
            },
        ]
    }


@pytest.fixture
def video_search_response():
    return {
        "items": [
            search_video_item("gta1", "GTA V Heist pt1"),
            search_video_item("mc1", "Minecraft build"),
        ]
    }


@pytest.fixture
def video_details_response():
    return {"items": [video_detail_item("gta1", "GTA V Heist pt1", "500000")]}


@pytest.fixture
def app_config():
    return AppConfig(
        api_key="dummy-key",
        channel="@Letsplay",
        max_results=1000,
        published_after="2013-03-25T00:00:00Z",
        published_before="2025-04-02T23:59:59Z",
        title_filter="GTA V",
    )


@pytest.fixture
def write_settings(tmp_path):
    """Writes a settings document to tmp_path and returns its path."""

    def _write(data, name="appsettings.json"):
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def mock_build(mocker):
    """Patches googleapiclient's build(); returns (build mock, service mock)."""
    build = mocker.patch("report_pipeline.core.youtube.youtube_client.build")
    service = build.return_value.__enter__.return_value
    return build, service
