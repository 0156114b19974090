"""Command-line interface for world backups."""

import logging
import sys
from pathlib import Path
import click
from typing import Optional

from .core.errors import NoCandidateError
from .core.models import RunStatus
from .core.resolver import PathResolver
from .core.runner import FAILURE_MESSAGE, BackupRunner
from .config.config_manager import ConfigManager
from .utils.formatters import format_date, format_megabytes, parse_date_tag

LOG_FORMAT = '%(asctime)s: %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(level: str, log_file: Optional[str] = None):
    """Set up logging configuration."""
    # Convert string level to logging constant
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # Set up root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    # Add console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Add file handler if specified
    if log_file:
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            click.echo(f"Warning: Could not set up file logging: {e}", err=True)


def _validate_date(ctx, param, value):
    if value is None:
        return None
    try:
        return parse_date_tag(value)
    except ValueError:
        raise click.BadParameter("date must be in YYYY-MM-DD format")


def _load_config(ctx, required_paths=None, **overrides) -> ConfigManager:
    config_manager = ConfigManager(ctx.obj.get('config_path'))
    config_manager.load_config(overrides, required_paths)
    return config_manager


def _log_level(ctx, config_manager: ConfigManager) -> str:
    return ctx.obj.get('log_level') or config_manager.get_logging_config().get('level', 'INFO')


@click.group()
@click.option('--config', '-c', 'config_path',
              help='Path to configuration file')
@click.option('--log-level', default=None,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level (overrides the configuration file)')
@click.pass_context
def cli(ctx, config_path: Optional[str], log_level: Optional[str]):
    """Bedrock Backup - copy the latest server's worlds into a dated backup folder."""

    # Ensure context exists
    ctx.ensure_object(dict)

    ctx.obj['config_path'] = config_path
    ctx.obj['log_level'] = log_level


@cli.command()
@click.option('--server-root', help='Directory containing server version directories')
@click.option('--backup-dir', help='Directory receiving dated backup folders')
@click.option('--log-file', help='Log file path')
@click.option('--date', 'date_tag', callback=_validate_date,
              help='Date tag for backup names (YYYY-MM-DD, defaults to today)')
@click.pass_context
def run(ctx, server_root: Optional[str], backup_dir: Optional[str],
        log_file: Optional[str], date_tag: Optional[str]):
    """Back up the worlds of the most recently updated server."""
    try:
        config_manager = _load_config(
            ctx,
            server_root_directory=server_root,
            backup_directory=backup_dir,
            log_file=log_file
        )
    except (FileNotFoundError, ValueError) as e:
        # Only a --log-file given on the command line is known at this point
        setup_logging(ctx.obj.get('log_level') or 'INFO', log_file)
        logger = logging.getLogger('bedrock_backup')
        logger.error(f"Configuration error: {e}")
        logger.error(FAILURE_MESSAGE)
        sys.exit(1)

    setup_logging(_log_level(ctx, config_manager), config_manager.get_log_file())

    runner = BackupRunner(config_manager, logger=logging.getLogger('bedrock_backup'))
    outcome = runner.run(date_tag)

    if outcome.status is RunStatus.SUCCESS:
        click.echo(f"✅ Backup written to {outcome.result.destination_path} "
                   f"({format_megabytes(outcome.result.total_bytes)})")
    elif outcome.status is RunStatus.EMPTY_WORLDS:
        click.echo("⚠️  No world data found - nothing was backed up")
    else:
        click.echo(f"❌ Backup failed: {outcome.error}", err=True)

    sys.exit(outcome.exit_code)


@cli.command()
@click.option('--server-root', help='Directory containing server version directories')
@click.pass_context
def latest(ctx, server_root: Optional[str]):
    """Show version directories and which one would be backed up."""
    try:
        config_manager = _load_config(
            ctx,
            required_paths=['server_root_directory'],
            server_root_directory=server_root
        )
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    setup_logging(_log_level(ctx, config_manager))

    resolver = PathResolver(config_manager.get_server_config().get('version_prefix', 'bedrock-server'))
    root = config_manager.get_server_root()

    try:
        candidates = resolver.find_version_directories(root)
        selected = resolver.select_latest_version_directory(root)
    except NoCandidateError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    click.echo(f"\n🗂️  Version directories in {root}")
    click.echo("=" * 50)

    for candidate in sorted(candidates, key=lambda c: c.modified_ns, reverse=True):
        marker = "➡️ " if candidate.path == selected.path else "   "
        click.echo(f"{marker}{candidate.name} ({format_date(candidate.modified_time)})")

    click.echo(f"\nSelected: {selected.name}")


@cli.command()
@click.pass_context
def validate_config(ctx):
    """Validate configuration file."""
    try:
        config_manager = _load_config(ctx)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"❌ Configuration validation failed: {e}", err=True)
        sys.exit(1)

    click.echo("✅ Configuration loaded successfully")

    server_config = config_manager.get_server_config()
    retention_config = config_manager.get_retention_config()

    click.echo(f"\n📊 Configuration Summary:")
    click.echo(f"   Config file: {config_manager.loaded_from or 'none (defaults only)'}")
    click.echo(f"   Server root: {config_manager.get_server_root()}")
    click.echo(f"   Backup directory: {config_manager.get_backup_directory()}")
    click.echo(f"   Log file: {config_manager.get_log_file()}")
    click.echo(f"   Version prefix: {server_config['version_prefix']}")
    click.echo(f"   Worlds directory: {server_config['worlds_directory']}")

    if retention_config.get('enabled'):
        click.echo(f"   🗑️  Retention: keep {retention_config['days']} days")
    else:
        click.echo("   🗑️  Retention: disabled")


def main():
    """Main CLI entry point."""
    cli()


if __name__ == '__main__':
    main()
