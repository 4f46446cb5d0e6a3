"""Command-line host adapter for the publishing step.

CI systems call `connect-publisher publish` as a post-build step:

    connect-publisher publish --workspace "$WORKSPACE" --build-result "$RESULT"

Exit codes:
  0: the run happened (individual artifact failures are only logged)
  2: settings or configuration file are invalid
"""

from pathlib import Path
from typing import Optional

import click
import structlog
from pydantic import ValidationError

from publisher.core.config import Settings, get_settings
from publisher.core.logging import configure_structlog, set_build_id
from publisher.notifier import (
    BuildResult,
    ConfigError,
    ConsoleLogSink,
    PublisherConfig,
    load_publisher_config,
    publish_artifacts,
)

EXIT_CONFIG_ERROR = 2

_BUILD_RESULT_NAMES = [r.name for r in BuildResult]


def _fail(ctx: click.Context, message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    ctx.exit(EXIT_CONFIG_ERROR)


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as e:
        problem = e.errors()[0]
        field = ".".join(str(part) for part in problem["loc"])
        raise ConfigError(f"Invalid environment setting {field} ({problem['msg']})") from e


def _resolve_config(
    settings: Settings,
    config_file: Optional[Path],
    token: Optional[str],
) -> tuple[PublisherConfig, str]:
    """Load the config file and apply the token precedence (CLI > env > file)."""
    path = config_file or settings.config_file
    config = load_publisher_config(path).with_token(token or settings.token)
    return config, config.require_token()


@click.group(help="Upload build artifacts to Connect endpoints.")
@click.version_option(package_name="connect-publisher")
def cli() -> None:
    pass


@cli.command("publish")
@click.option(
    "--workspace",
    required=True,
    type=click.Path(path_type=Path, file_okay=False),
    help="Root of the build workspace to search for artifacts.",
)
@click.option(
    "--build-result",
    type=click.Choice(_BUILD_RESULT_NAMES, case_sensitive=False),
    default="SUCCESS",
    show_default=True,
    envvar="CONNECT_BUILD_RESULT",
    help="Outcome of the build. Nothing is uploaded for FAILURE or worse.",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Artifact configuration file (default: CONNECT_CONFIG_FILE or connect.toml).",
)
@click.option("--token", default=None, help="Upload token (overrides CONNECT_TOKEN).")
@click.option("--build-id", default="", envvar="CONNECT_BUILD_ID", help="Tag diagnostics with this ID.")
@click.option("--debug", is_flag=True, help="Emit debug diagnostics on stderr.")
@click.option("--json-logs", is_flag=True, help="Emit diagnostics as JSON.")
@click.pass_context
def publish(
    ctx: click.Context,
    workspace: Path,
    build_result: str,
    config_file: Optional[Path],
    token: Optional[str],
    build_id: str,
    debug: bool,
    json_logs: bool,
) -> None:
    """Resolve and upload every configured artifact."""
    try:
        settings = _load_settings()
        config, effective_token = _resolve_config(settings, config_file, token)
    except ConfigError as e:
        _fail(ctx, str(e))
        return

    configure_structlog(
        debug=debug or settings.debug,
        json_logs=json_logs or settings.json_logs,
    )
    set_build_id(build_id)

    log = structlog.get_logger("publisher.cli")
    log.debug(
        "publish.start",
        workspace=str(workspace),
        build_result=build_result.upper(),
        artifacts=len(config.artifacts),
    )

    publish_artifacts(
        BuildResult.parse(build_result),
        workspace,
        effective_token,
        config.specs(),
        ConsoleLogSink(),
        timeout=settings.http_timeout,
    )

    log.debug("publish.done")


@cli.command("check")
@click.option(
    "--config",
    "config_file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Artifact configuration file (default: CONNECT_CONFIG_FILE or connect.toml).",
)
@click.option("--token", default=None, help="Upload token (overrides CONNECT_TOKEN).")
@click.pass_context
def check(ctx: click.Context, config_file: Optional[Path], token: Optional[str]) -> None:
    """Validate the token, artifact patterns and URLs without uploading."""
    try:
        settings = _load_settings()
        config, _ = _resolve_config(settings, config_file, token)
    except ConfigError as e:
        _fail(ctx, str(e))
        return

    click.echo(f"Configuration OK ({len(config.artifacts)} artifacts).")


def main() -> None:
    cli()
