"""Tests for CLI routing and handler exit codes."""
import argparse
import json

from sitepush.cli import create_argument_parser, main
from sitepush.modes.deploy_handler import DeployHandler
from sitepush.modes.plan_handler import PlanHandler


def make_args(config_file, **kwargs):
    kwargs.setdefault("dry_run", False)
    kwargs.setdefault("concurrency", None)
    return argparse.Namespace(config_file=config_file, **kwargs)


def write_config(tmp_path, upload_directory):
    path = tmp_path / "sitepush.json"
    path.write_text(json.dumps({"domain": "example.com", "upload_directory": upload_directory}))
    return str(path)


def test_parser_deploy_flags():
    args = create_argument_parser().parse_args(["--verbose", "deploy", "--dry-run", "--concurrency", "3"])
    assert args.command == "deploy"
    assert args.dry_run is True
    assert args.concurrency == 3
    assert args.verbose is True


def test_main_without_command_returns_error():
    assert main([]) == 1


def test_main_config_command(tmp_path):
    path = str(tmp_path / "sitepush.json")
    assert main(["--config-file", path, "config", '{"domain": "example.com"}']) == 0


def test_deploy_without_config_fails(tmp_path, operations):
    handler = DeployHandler(make_args(str(tmp_path / "missing.json")), operations=operations)
    assert handler.execute() == 1


def test_deploy_synchronizes_bucket(tmp_path, make_site, operations, s3_client):
    make_site({"index.html": b"home", "blog/index.html": b"blog"})
    s3_client.seed("stale.html")
    config_path = write_config(tmp_path, "build")

    assert DeployHandler(make_args(config_path), operations=operations).execute() == 0
    assert sorted(s3_client.objects) == ["blog", "index.html"]


def test_deploy_failure_returns_error(tmp_path, make_site, operations, s3_client):
    make_site({"index.html": b"home"})
    s3_client.fail_keys.add("index.html")
    config_path = write_config(tmp_path, "build")

    assert DeployHandler(make_args(config_path), operations=operations).execute() == 1


def test_deploy_dry_run_leaves_bucket(tmp_path, make_site, operations, s3_client):
    make_site({"index.html": b"home"})
    config_path = write_config(tmp_path, "build")

    assert DeployHandler(make_args(config_path, dry_run=True), operations=operations).execute() == 0
    assert s3_client.objects == {}


def test_plan_makes_no_changes(tmp_path, make_site, operations, s3_client):
    make_site({"index.html": b"home"})
    s3_client.seed("old.html")
    config_path = write_config(tmp_path, "build")

    assert PlanHandler(make_args(config_path), operations=operations).execute() == 0
    assert s3_client.calls == []
    assert list(s3_client.objects) == ["old.html"]


def test_deploy_with_numeric_domain_fails_cleanly(tmp_path, operations):
    path = tmp_path / "sitepush.json"
    path.write_text(json.dumps({"domain": 123, "upload_directory": "build"}))

    assert DeployHandler(make_args(str(path)), operations=operations).execute() == 1


def test_plan_json_output(tmp_path, make_site, operations, s3_client, capsys):
    make_site({"index.html": b"home", "blog/index.html": b"blog"})
    s3_client.seed("index.html", b"old")
    s3_client.seed("old.html")
    config_path = write_config(tmp_path, "build")

    assert PlanHandler(make_args(config_path, json=True), operations=operations).execute() == 0

    assert json.loads(capsys.readouterr().out) == {
        "add": [{"path": "blog/index.html", "key": "blog"}],
        "update": [{"path": "index.html", "key": "index.html"}],
        "remove": [{"key": "old.html"}],
    }


def test_deploy_json_report(tmp_path, make_site, operations, s3_client, capsys):
    make_site({"index.html": b"home"})
    s3_client.seed("stale.html")
    config_path = write_config(tmp_path, "build")

    assert DeployHandler(make_args(config_path, json=True), operations=operations).execute() == 0

    report = json.loads(capsys.readouterr().out)
    assert report["added"] == ["index.html"]
    assert report["removed"] == ["stale.html"]
    assert report["error"] is None
    assert report["dry_run"] is False


def test_deploy_json_report_on_failure(tmp_path, make_site, operations, s3_client, capsys):
    make_site({"a.html": b"a", "b.html": b"b"})
    s3_client.fail_keys.add("a.html")
    config_path = write_config(tmp_path, "build")

    assert DeployHandler(make_args(config_path, json=True), operations=operations).execute() == 1

    report = json.loads(capsys.readouterr().out)
    assert report["failed_key"] == "a.html"
    assert report["not_attempted"] == ["b.html"]
    assert "AccessDenied" in report["error"]


def test_parser_json_flags():
    parser = create_argument_parser()
    assert parser.parse_args(["plan", "--json"]).json is True
    assert parser.parse_args(["deploy"]).json is False
