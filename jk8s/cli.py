"""Command-line settings for the operator and the standalone manager."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Union

from jk8s.options import (
    WorkspaceControllerOptions,
    get_image_pull_policy,
    parse_gvk_watches,
)

OPERATOR_LEADER_ELECTION_ID = "a446807b.jupyter.org"
MANAGER_LEADER_ELECTION_ID = "jupyter-k8s-controller"

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


def _parse_bool(text: str) -> bool:
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value {text!r}")


def _new_parser(prog: str, description: str) -> argparse.ArgumentParser:
    return argparse.ArgumentParser(prog=prog, description=description, allow_abbrev=False)


def _flag(parser: argparse.ArgumentParser, name: str, default: str, help_text: str) -> None:
    parser.add_argument(
        f"--{name}", f"-{name}", dest=name.replace("-", "_"), default=default, help=help_text
    )


def _bool_flag(
    parser: argparse.ArgumentParser, name: str, default: bool, help_text: str
) -> None:
    parser.add_argument(
        f"--{name}",
        f"-{name}",
        dest=name.replace("-", "_"),
        nargs="?",
        const=True,
        default=default,
        type=_parse_bool,
        metavar="BOOL",
        help=help_text,
    )


def _add_controller_flags(parser: argparse.ArgumentParser) -> None:
    _flag(
        parser,
        "application-images-pull-policy",
        "",
        "Image pull policy for Application containers (Always, IfNotPresent, or Never)",
    )
    _flag(
        parser,
        "application-images-registry",
        "",
        "Registry prefix for application images (e.g. example.com/my-registry)",
    )


def _add_watch_flags(parser: argparse.ArgumentParser) -> None:
    _bool_flag(parser, "watch-traefik", False, "Watch traefik sub-resources (easy mode)")
    _flag(
        parser,
        "watch-resources-gvk",
        "",
        "Comma-separated list of Group/Version/Kind to watch "
        "(format: group/version/kind,group/version/kind,...)",
    )


_LEADER_HELP = (
    "Enable leader election for controller manager. "
    "Enabling this will ensure there is only one active controller manager."
)


@dataclass(frozen=True, kw_only=True)
class OperatorSettings:
    """Settings of the full operator: manager, metrics and webhook servers."""

    metrics_bind_address: str = "0"
    health_probe_bind_address: str = ":8081"
    leader_elect: bool = False
    metrics_secure: bool = True
    webhook_cert_path: str = ""
    webhook_cert_name: str = "tls.crt"
    webhook_cert_key: str = "tls.key"
    metrics_cert_path: str = ""
    metrics_cert_name: str = "tls.crt"
    metrics_cert_key: str = "tls.key"
    enable_http2: bool = False
    application_images_pull_policy: str = ""
    application_images_registry: str = ""
    watch_traefik: bool = False
    watch_resources_gvk: str = ""
    zap_devel: bool = True
    zap_encoder: str = ""
    zap_log_level: str = ""
    zap_stacktrace_level: str = ""
    zap_time_encoding: str = ""
    enable_webhooks: bool = True

    leader_election_id: str = OPERATOR_LEADER_ELECTION_ID

    @property
    def disable_http2(self) -> bool:
        """Whether servers are restricted to HTTP/1.1."""
        return not self.enable_http2

    @property
    def tls_next_protos(self) -> list[str] | None:
        """ALPN protocols for the TLS servers, or None to keep the defaults."""
        return ["http/1.1"] if self.disable_http2 else None

    @property
    def webhook_cert_files(self) -> tuple[Path, Path] | None:
        """Webhook certificate and key paths, or None to let them be generated."""
        if not self.webhook_cert_path:
            return None
        base = Path(self.webhook_cert_path)
        return base / self.webhook_cert_name, base / self.webhook_cert_key

    @property
    def metrics_cert_files(self) -> tuple[Path, Path] | None:
        """Metrics certificate and key paths, or None to let them be generated."""
        if not self.metrics_cert_path:
            return None
        base = Path(self.metrics_cert_path)
        return base / self.metrics_cert_name, base / self.metrics_cert_key

    @property
    def metrics_enabled(self) -> bool:
        """Whether the metrics endpoint is served at all."""
        return self.metrics_bind_address != "0"


@dataclass(frozen=True, kw_only=True)
class ManagerSettings:
    """Settings of the standalone controller manager."""

    metrics_bind_address: str = ":8080"
    health_probe_bind_address: str = ":8081"
    leader_elect: bool = False
    application_images_pull_policy: str = ""
    application_images_registry: str = ""
    require_template: bool = False
    watch_traefik: bool = False
    watch_resources_gvk: str = ""

    leader_election_id: str = MANAGER_LEADER_ELECTION_ID


def build_operator_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the operator."""
    parser = _new_parser("jk8s-operator", "Run the workspace operator.")
    _flag(
        parser,
        "metrics-bind-address",
        "0",
        "The address the metrics endpoint binds to. Use :8443 for HTTPS or :8080 for HTTP, "
        "or leave as 0 to disable the metrics service.",
    )
    _flag(parser, "health-probe-bind-address", ":8081", "The address the probe endpoint binds to.")
    _bool_flag(parser, "leader-elect", False, _LEADER_HELP)
    _bool_flag(
        parser,
        "metrics-secure",
        True,
        "If set, the metrics endpoint is served securely via HTTPS. "
        "Use --metrics-secure=false to use HTTP instead.",
    )
    _flag(parser, "webhook-cert-path", "", "The directory that contains the webhook certificate.")
    _flag(parser, "webhook-cert-name", "tls.crt", "The name of the webhook certificate file.")
    _flag(parser, "webhook-cert-key", "tls.key", "The name of the webhook key file.")
    _flag(
        parser,
        "metrics-cert-path",
        "",
        "The directory that contains the metrics server certificate.",
    )
    _flag(parser, "metrics-cert-name", "tls.crt", "The name of the metrics server certificate file.")
    _flag(parser, "metrics-cert-key", "tls.key", "The name of the metrics server key file.")
    _bool_flag(
        parser,
        "enable-http2",
        False,
        "If set, HTTP/2 will be enabled for the metrics and webhook servers",
    )
    _add_controller_flags(parser)
    _add_watch_flags(parser)
    _bool_flag(parser, "zap-devel", True, "Development mode logging defaults.")
    _flag(parser, "zap-encoder", "", "Log encoding (one of 'json' or 'console').")
    _flag(parser, "zap-log-level", "", "Log level verbosity.")
    _flag(parser, "zap-stacktrace-level", "", "Level at and above which stacktraces are captured.")
    _flag(parser, "zap-time-encoding", "", "Time encoding of log entries.")
    return parser


def build_manager_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the standalone manager."""
    parser = _new_parser("jk8s-manager", "Run the workspace controller manager.")
    _flag(parser, "metrics-bind-address", ":8080", "The address the metric endpoint binds to.")
    _flag(parser, "health-probe-bind-address", ":8081", "The address the probe endpoint binds to.")
    _bool_flag(parser, "leader-elect", False, _LEADER_HELP)
    _add_controller_flags(parser)
    _bool_flag(
        parser,
        "require-template",
        False,
        "Require all workspaces to reference a WorkspaceTemplate",
    )
    _add_watch_flags(parser)
    return parser


def parse_operator_args(argv: Sequence[str] | None) -> OperatorSettings:
    """Parse operator flags; webhooks are on unless ENABLE_WEBHOOKS is ``false``."""
    namespace = build_operator_parser().parse_args(argv)
    return OperatorSettings(
        **vars(namespace),
        enable_webhooks=os.environ.get("ENABLE_WEBHOOKS") != "false",
    )


def parse_manager_args(argv: Sequence[str] | None) -> ManagerSettings:
    """Parse standalone manager flags."""
    namespace = build_manager_parser().parse_args(argv)
    return ManagerSettings(**vars(namespace))


def controller_options(
    settings: Union[OperatorSettings, ManagerSettings],
) -> WorkspaceControllerOptions:
    """Build workspace controller options; raises ValueError on a malformed GVK list."""
    return WorkspaceControllerOptions(
        application_images_pull_policy=get_image_pull_policy(
            settings.application_images_pull_policy
        ),
        application_images_registry=settings.application_images_registry,
        watch_traefik=settings.watch_traefik,
        resource_watches=parse_gvk_watches(settings.watch_resources_gvk),
    )