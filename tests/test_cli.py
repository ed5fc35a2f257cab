from pathlib import Path

import pytest

from jk8s.cli import (
    ManagerSettings,
    OperatorSettings,
    build_manager_parser,
    build_operator_parser,
    controller_options,
    parse_manager_args,
    parse_operator_args,
)
from jk8s.options import GVKWatch, PullPolicy


def test_operator_defaults(monkeypatch):
    monkeypatch.delenv("ENABLE_WEBHOOKS", raising=False)
    settings = parse_operator_args([])
    assert settings.metrics_bind_address == "0"
    assert settings.health_probe_bind_address == ":8081"
    assert settings.leader_elect is False
    assert settings.metrics_secure is True
    assert settings.webhook_cert_name == "tls.crt"
    assert settings.webhook_cert_key == "tls.key"
    assert settings.metrics_cert_name == "tls.crt"
    assert settings.metrics_cert_key == "tls.key"
    assert settings.enable_http2 is False
    assert settings.enable_webhooks is True
    assert settings.leader_election_id == "a446807b.jupyter.org"


def test_manager_defaults():
    settings = parse_manager_args([])
    assert settings == ManagerSettings()
    assert settings.metrics_bind_address == ":8080"
    assert settings.health_probe_bind_address == ":8081"
    assert settings.require_template is False
    assert settings.leader_election_id == "jupyter-k8s-controller"


def test_bool_flag_without_value_sets_true():
    settings = parse_manager_args(["--leader-elect", "--require-template"])
    assert settings.leader_elect is True
    assert settings.require_template is True


def test_bool_flag_with_explicit_false():
    settings = parse_operator_args(["--metrics-secure=false"])
    assert settings.metrics_secure is False


def test_single_dash_flags_accepted():
    settings = parse_manager_args(["-leader-elect", "-watch-traefik"])
    assert settings.leader_elect is True
    assert settings.watch_traefik is True


def test_invalid_bool_exits():
    with pytest.raises(SystemExit):
        parse_operator_args(["--enable-http2=maybe"])


def test_unknown_flag_exits():
    with pytest.raises(SystemExit):
        parse_manager_args(["--metrics-secure"])


def test_string_flags_are_stored():
    settings = parse_manager_args(
        ["--application-images-registry", "example.com/my-registry",
         "--health-probe-bind-address=:9000"]
    )
    assert settings.application_images_registry == "example.com/my-registry"
    assert settings.health_probe_bind_address == ":9000"


def test_webhooks_disabled_by_environment(monkeypatch):
    monkeypatch.setenv("ENABLE_WEBHOOKS", "false")
    assert parse_operator_args([]).enable_webhooks is False
    monkeypatch.setenv("ENABLE_WEBHOOKS", "true")
    assert parse_operator_args([]).enable_webhooks is True


def test_http2_disabled_by_default():
    settings = parse_operator_args([])
    assert settings.disable_http2 is True
    assert settings.tls_next_protos == ["http/1.1"]
    enabled = parse_operator_args(["--enable-http2"])
    assert enabled.tls_next_protos is None


def test_cert_files_only_with_path():
    assert parse_operator_args([]).webhook_cert_files is None
    assert parse_operator_args([]).metrics_cert_files is None
    settings = parse_operator_args(
        ["--webhook-cert-path", "/certs", "--metrics-cert-path", "/m", "--metrics-cert-key=k.pem"]
    )
    assert settings.webhook_cert_files == (Path("/certs/tls.crt"), Path("/certs/tls.key"))
    assert settings.metrics_cert_files == (Path("/m/tls.crt"), Path("/m/k.pem"))


def test_metrics_enabled_follows_bind_address():
    assert parse_operator_args([]).metrics_enabled is False
    assert parse_operator_args(["--metrics-bind-address", ":8443"]).metrics_enabled is True


def test_controller_options_from_manager_settings():
    settings = parse_manager_args(
        [
            "--application-images-pull-policy", "never",
            "--application-images-registry", "example.com/reg",
            "--watch-traefik",
            "--watch-resources-gvk", "traefik.io/v1alpha1/IngressRoute,/v1/Service",
        ]
    )
    options = controller_options(settings)
    assert options.application_images_pull_policy is PullPolicy.NEVER
    assert options.application_images_registry == "example.com/reg"
    assert options.watch_traefik is True
    assert options.resource_watches == [
        GVKWatch(group="traefik.io", version="v1alpha1", kind="IngressRoute"),
        GVKWatch(group="", version="v1", kind="Service"),
    ]


def test_controller_options_from_operator_defaults():
    options = controller_options(OperatorSettings())
    assert options.application_images_pull_policy is PullPolicy.IF_NOT_PRESENT
    assert options.resource_watches == []


def test_controller_options_rejects_bad_gvk():
    settings = ManagerSettings(watch_resources_gvk="bad/format")
    with pytest.raises(ValueError, match="invalid GVK format"):
        controller_options(settings)


def test_parsers_expose_same_controller_flags():
    operator_dests = {action.dest for action in build_operator_parser()._actions}
    manager_dests = {action.dest for action in build_manager_parser()._actions}
    shared = {
        "application_images_pull_policy",
        "application_images_registry",
        "watch_traefik",
        "watch_resources_gvk",
        "leader_elect",
    }
    assert shared <= operator_dests
    assert shared <= manager_dests
    assert "require_template" in manager_dests
    assert "require_template" not in operator_dests