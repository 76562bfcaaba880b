import json
from unittest.mock import MagicMock

import pytest

from report_pipeline import main as main_module
from report_pipeline.core.config import AppConfig
from report_pipeline.core.youtube import VideoInfo, YouTubeClient
from tests.conftest import make_http_error


def data_rows(output):
    lines = output.splitlines()
    rule = lines.index("-" * 127)
    return lines[rule + 1:]


def test_end_to_end_report_with_title_filter(
    app_config, mock_build, channel_search_response, video_search_response, video_details_response, capsys
):
    _, service = mock_build
    service.search.return_value.list.return_value.execute.side_effect = [
        channel_search_response,
        video_search_response,
    ]
    service.videos.return_value.list.return_value.execute.return_value = video_details_response

    exit_code = main_module.run(app_config, YouTubeClient(app_config.api_key))

    assert exit_code == 0
    service.videos.return_value.list.assert_called_once_with(part="snippet,statistics", id="gta1")
    out = capsys.readouterr().out
    assert "Channel ID: UCletsplay0000000000000a" in out
    rows = data_rows(out)
    assert len(rows) == 1
    assert rows[0].startswith("GTA V Heist pt1")
    assert "500,000" in rows[0]


def test_channel_not_found_stops_the_run(app_config, mock_build, capsys):
    build, service = mock_build
    service.search.return_value.list.return_value.execute.return_value = {"items": []}

    exit_code = main_module.run(app_config, YouTubeClient(app_config.api_key))

    assert exit_code == 0
    assert "Channel not found." in capsys.readouterr().out
    assert build.call_count == 1
    service.search.return_value.list.return_value.execute.assert_called_once()
    service.videos.assert_not_called()


@pytest.fixture
def youtube_client():
    return MagicMock(spec=YouTubeClient)


def test_channel_search_failure_skips_downstream(app_config, youtube_client, capsys):
    youtube_client.resolve_channel_id.return_value = None

    main_module.run(app_config, youtube_client)

    youtube_client.search_videos.assert_not_called()
    youtube_client.fetch_videos_details.assert_not_called()
    assert "Channel not found." in capsys.readouterr().out


def test_video_list_failure_skips_details(app_config, youtube_client, capsys):
    youtube_client.resolve_channel_id.return_value = "UC1"
    youtube_client.search_videos.side_effect = make_http_error(403)

    exit_code = main_module.run(app_config, youtube_client)

    assert exit_code == 0
    youtube_client.fetch_videos_details.assert_not_called()
    assert "No videos found for this channel with the specified title prefix." in capsys.readouterr().out


def test_details_failure_prints_no_table(app_config, youtube_client, capsys):
    youtube_client.resolve_channel_id.return_value = "UC1"
    youtube_client.search_videos.return_value = {"items": [{"id": {"videoId": "v1"}, "snippet": {"title": "GTA V"}}]}
    youtube_client.fetch_videos_details.return_value = None

    exit_code = main_module.run(app_config, youtube_client)

    assert exit_code == 1
    out = capsys.readouterr().out
    assert "Error fetching video details." in out
    assert "Published Date" not in out


def test_csv_output_is_written(youtube_client, tmp_path):
    youtube_client.resolve_channel_id.return_value = "UC1"
    youtube_client.search_videos.return_value = {"items": [{"id": {"videoId": "v1"}, "snippet": {"title": "GTA V"}}]}
    youtube_client.fetch_videos_details.return_value = [VideoInfo("v1", "GTA V", "2015-01-01T00:00:00Z", "10")]
    csv_path = tmp_path / "report.csv"
    config = AppConfig(
        api_key="dummy-key",
        channel="@Letsplay",
        max_results=10,
        published_after="2013-03-25T00:00:00Z",
        published_before="2025-04-02T23:59:59Z",
        title_filter="GTA V",
        csv_output=str(csv_path),
    )

    assert main_module.run(config, youtube_client) == 0
    assert csv_path.exists()


def test_main_exits_on_missing_api_key(tmp_path, monkeypatch, mock_build):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "appsettings.json").write_text(json.dumps({"YouTube": {}}), encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        main_module.main([])

    assert exc.value.code == 1
    build, _ = mock_build
    build.assert_not_called()


def test_main_exits_on_missing_settings_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as exc:
        main_module.main([str(tmp_path / "nope.json")])

    assert exc.value.code == 1


def test_main_runs_with_settings_path(tmp_path, monkeypatch, mocker):
    monkeypatch.chdir(tmp_path)
    settings = tmp_path / "custom.json"
    settings.write_text(json.dumps({"YouTube": {"API_KEY": "k"}}), encoding="utf-8")
    run = mocker.patch.object(main_module, "run", return_value=0)

    with pytest.raises(SystemExit) as exc:
        main_module.main([str(settings)])

    assert exc.value.code == 0
    config, client = run.call_args.args
    assert config.api_key == "k"
    assert isinstance(client, YouTubeClient)


def test_main_reports_unexpected_errors(tmp_path, monkeypatch, mocker):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "appsettings.json").write_text(json.dumps({"YouTube": {"API_KEY": "k"}}), encoding="utf-8")
    mocker.patch.object(main_module, "run", side_effect=RuntimeError("network down"))

    with pytest.raises(SystemExit) as exc:
        main_module.main([])

    assert exc.value.code == 1
