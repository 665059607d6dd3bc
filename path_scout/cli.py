# === FILE: path_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска сканера PathScout через командную строку.

Команды:
  scan      Проверить связь с целью и перебрать пути из словаря
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/path_scout.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для диагностических логов (stderr, если не указан)
  --log-format FORMAT Формат логирования
  --error-log PATH    Журнал ошибок (default: error.log)

Команда scan опции:
  -t, --target URL    Цель, должна начинаться с http:// или https://
  -d, --dictionary    Файл словаря
  -w, --workers N     Число воркеров
  -q, --quiet         Печатать только URL с кодом 200
  -a, --all           Печатать все результаты
  -l, --log           Дописывать каждый результат в журнал сканирования
  --json/--html PATH  Сохранить отчёт по итогам

Дополнительно:
  --version, -v       Показать версию PathScout

Пример:
  path_scout scan -t https://example.com/ -d wordlists/common.txt -w 20 -a -l
"""
import asyncio
import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click

from path_scout import __version__
from path_scout.config import ValidationError, load_config
from path_scout.errors import PathScoutError, ScanAborted
from path_scout.logger import error_logger, init_logging
from path_scout.report.html_report import render_html
from path_scout.report.json_report import render_json
from path_scout.scanner import start_scan

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str, error_log: Optional[logging.Logger] = None) -> NoReturn:
    click.secho(message, fg='red', err=True)
    if error_log is not None:
        error_log.error("%s", message)
    sys.exit(1)


def _describe(exc: ValidationError) -> str:
    """Первая ошибка pydantic в одну строку."""
    err = exc.errors()[0]
    field = ".".join(str(part) for part in err.get("loc", ())) or "config"
    msg = err.get("msg", str(exc)).removeprefix("Value error, ")
    return f"Error : Invalid configuration ({field}): {msg}"


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='PathScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.option(
    '--error-log', 'error_log_path',
    default='error.log',
    show_default=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Журнал ошибок (дописывается)'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format, error_log_path):
    """Группа команд PathScout CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path
    ctx.obj['error_log'] = error_logger(error_log_path)


@cli.command('scan', context_settings=CONTEXT_SETTINGS)
@click.option('--target', '-t', 'target', default=None, help='Цель перебора (http:// или https://)')
@click.option(
    '--dictionary', '-d', 'dictionary',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Путь к файлу словаря'
)
@click.option('--workers', '-w', 'workers', type=int, default=None, help='Число воркеров [1]')
@click.option('--quiet', '-q', 'quiet', is_flag=True, help='Показывать только HTTP 200 (только URL)')
@click.option('--all', '-a', 'show_all', is_flag=True, help='Показывать все результаты, включая не-200')
@click.option('--log', '-l', 'log_results', is_flag=True, help='Записывать результаты в журнал сканирования')
@click.option(
    '--scan-log', 'scan_log',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Файл журнала сканирования [scan.log]'
)
@click.option('--timeout', 'timeout', type=float, default=None, help='Таймаут на запрос, секунд [10]')
@click.option('--user-agent', 'user_agent', default=None, help='Заголовок User-Agent')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблоном report.html.j2 (по умолчанию встроенный)'
)
@click.option('--pretty/--compact', default=True, help='Отступы в JSON-отчёте')
@click.pass_context
def scan(ctx, target, dictionary, workers, quiet, show_all, log_results, scan_log, timeout,
         user_agent, json_output, html_output, template_dir, pretty):
    """Проверить связь с целью и перебрать пути из словаря."""
    error_log = ctx.obj['error_log']
    try:
        cfg = load_config(
            ctx.obj['config_path'],
            target=target,
            dictionary=dictionary,
            workers=workers,
            quiet=quiet or None,
            show_all=show_all or None,
            log_results=log_results or None,
            scan_log=scan_log,
            timeout=timeout,
            user_agent=user_agent,
        )
    except ValidationError as e:
        print_error(_describe(e), error_log)
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Error : Ошибка загрузки конфигурации: {e}', error_log)

    try:
        # полный список результатов нужен только для файлов отчёта
        keep_results = bool(json_output or html_output)
        report = asyncio.run(start_scan(cfg, error_log=error_log, keep_results=keep_results))
    except ScanAborted as e:
        click.echo(str(e))
        ctx.exit(0)
    except PathScoutError as e:
        # компоненты уже записали причину в журнал ошибок
        print_error(f'Error : {e}')

    if json_output:
        try:
            saved_json = render_json(report, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved_json}', err=True)
        except OSError as e:
            print_error(f'Error : Ошибка при сохранении JSON: {e}', error_log)

    if html_output:
        try:
            saved_html = render_html(report, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}', err=True)
        except Exception as e:
            print_error(f'Error : Ошибка при сохранении HTML: {e}', error_log)


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    try:
        cfg = load_config(ctx.obj['config_path'])
    except ValidationError as e:
        print_error(_describe(e))
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
