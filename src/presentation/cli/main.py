"""
Command line interface for the archive search service.

Commands:
    serve   run the HTTP API
    search  search messages and print a page of results
    stats   print corpus statistics
    user    resolve one author id
"""

import sys
from typing import Optional

import click

from ...shared.exceptions import ArchiveSearchError, ValidationError
from ...shared.logging import LogLevel, configure_logging
from ..containers import ServiceContainer
from .formatters import OutputFormatter


def _get_container(ctx: click.Context) -> ServiceContainer:
    """Return the container from the context, building it on first use."""
    container = ctx.obj.get("container")
    if container is None:
        container = ServiceContainer.from_config_manager(
            config_dir=ctx.obj.get("config_dir"),
            environment=ctx.obj.get("environment")
        )
        ctx.obj["container"] = container
        ctx.call_on_close(container.close)
    return container


def _fail(formatter: OutputFormatter, error: ArchiveSearchError) -> None:
    details = None
    if isinstance(error, ValidationError):
        details = f"field: {error.field}"
    elif error.cause is not None:
        details = str(error.cause)
    if formatter.use_rich:
        formatter.console.print(formatter.format_error(error.message, details))
    else:
        click.echo(formatter.format_error(error.message, details), err=True)
    sys.exit(1)


@click.group()
@click.option("--config-dir", default=None, help="Directory holding base.yaml and <env>.yaml")
@click.option("--env", "environment", default=None, help="Configuration environment name")
@click.option("--log-level", default="WARNING", show_default=True,
              type=click.Choice([level.value for level in LogLevel], case_sensitive=False))
@click.pass_context
def cli(ctx: click.Context, config_dir: Optional[str], environment: Optional[str], log_level: str):
    """Search an archive of Discord messages."""
    ctx.ensure_object(dict)
    ctx.obj.setdefault("config_dir", config_dir)
    ctx.obj.setdefault("environment", environment)
    if "container" not in ctx.obj:
        configure_logging(level=LogLevel.from_name(log_level), output=sys.stderr)


@cli.command()
@click.option("--host", default=None, help="Bind address (defaults to configuration)")
@click.option("--port", default=None, type=int, help="Port (defaults to configuration)")
@click.option("--debug", is_flag=True, help="Run Flask in debug mode")
@click.pass_context
def serve(ctx: click.Context, host: Optional[str], port: Optional[int], debug: bool):
    """Run the HTTP API."""
    from ..http import create_app

    container = _get_container(ctx)
    config = container.config
    configure_logging(
        level=LogLevel.from_name(config.get_log_level()),
        log_file=config.get_log_file()
    )
    container.prepare_backend()
    app = create_app(container)
    app.run(
        host=host or config.get_server_host(),
        port=port or config.get_server_port(),
        debug=debug
    )


@cli.command()
@click.option("--content", default=None, help="Exact phrase to match in message content")
@click.option("--author-id", default=None, help="Author id")
@click.option("--channel-id", default=None, help="Channel id")
@click.option("--guild-id", default=None, help="Guild id")
@click.option("--sort", default="desc", show_default=True, help="Timestamp order: asc or desc")
@click.option("--page", default="1", show_default=True, help="1-based page number")
@click.option("--json", "as_json", is_flag=True, help="Print raw JSON")
@click.option("--plain", is_flag=True, help="Plain text tables instead of rich output")
@click.option("--no-users", is_flag=True, help="Do not resolve author names")
@click.pass_context
def search(
    ctx: click.Context,
    content: Optional[str],
    author_id: Optional[str],
    channel_id: Optional[str],
    guild_id: Optional[str],
    sort: str,
    page: str,
    as_json: bool,
    plain: bool,
    no_users: bool
):
    """Search messages by content phrase and/or ids."""
    formatter = OutputFormatter(use_rich=not (plain or as_json))
    container = _get_container(ctx)
    params = {
        "content": content,
        "author_id": author_id,
        "channel_id": channel_id,
        "guild_id": guild_id,
        "sort": sort,
        "page": page
    }
    try:
        result = container.search_handler.handle_search(params)
    except ArchiveSearchError as e:
        _fail(formatter, e)
        return

    users = {} if no_users else container.enrichment_service.resolve_authors(result)
    if as_json:
        payload = result.to_dict()
        payload["users"] = {uid: user.to_dict() for uid, user in users.items()}
        click.echo(formatter.format_json(payload))
        return
    formatter.print(formatter.format_search_result(result, users))


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print raw JSON")
@click.option("--plain", is_flag=True, help="Plain text table instead of rich output")
@click.pass_context
def stats(ctx: click.Context, as_json: bool, plain: bool):
    """Print corpus statistics."""
    formatter = OutputFormatter(use_rich=not (plain or as_json))
    container = _get_container(ctx)
    try:
        statistics = container.statistics_service.get_statistics()
    except ArchiveSearchError as e:
        _fail(formatter, e)
        return

    if as_json:
        click.echo(formatter.format_json(statistics.to_dict()))
        return
    formatter.print(formatter.format_statistics(statistics))


@cli.command()
@click.argument("user_id")
@click.option("--token", default=None, help="Bot token to use instead of the configured pool")
@click.option("--json", "as_json", is_flag=True, help="Print raw JSON")
@click.option("--plain", is_flag=True, help="Plain text table instead of rich output")
@click.pass_context
def user(ctx: click.Context, user_id: str, token: Optional[str], as_json: bool, plain: bool):
    """Resolve an author id to a username and avatar."""
    formatter = OutputFormatter(use_rich=not (plain or as_json))
    container = _get_container(ctx)
    resolved = container.enrichment_service.resolve_user(user_id, bot_token=token)
    if as_json:
        click.echo(formatter.format_json(resolved.to_dict()))
        return
    formatter.print(formatter.format_user(resolved))


if __name__ == "__main__":
    cli()
