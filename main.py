"""Главный файл запуска PCM Explorer."""

import asyncio
import sys
from pathlib import Path
from typing import Optional

# Устанавливаем кодировку для Windows
if sys.platform == "win32":
    import codecs

    sys.stdout = codecs.getwriter("utf-8")(sys.stdout.detach())
    sys.stderr = codecs.getwriter("utf-8")(sys.stderr.detach())

# Добавляем src в путь
src_path = Path(__file__).parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from pcm_explorer.cli import CommandRunner, HELP_TEXT
from pcm_explorer.config import get_explorer_config, validate_config
from pcm_explorer.explorer import PcmExplorer, PcmExplorerConfig
from pcm_explorer.formatting import TextCurveRenderer
from pcm_explorer.logging import SessionLogger
from pcm_explorer.sources import FileTextSource, HttpTextSource

DEMO_COMMANDS = [
    "status",
    "list",
    "curve",
    "filter 270 320",
    "list",
    "details",
    "curve",
    "filter 400 300",
    "reset",
]


def create_explorer(base_url: str = "", base_dir: Optional[Path] = None, render: bool = True) -> PcmExplorer:
    """
    Создание и настройка PcmExplorer.

    Args:
        base_url: Базовый URL таблиц; если пуст, таблицы читаются с диска
        base_dir: Каталог, от которого разрешаются относительные пути
        render: Подключить текстовую отрисовку кривых

    Returns:
        Настроенный PcmExplorer
    """
    settings = get_explorer_config()
    errors = validate_config(settings)
    if errors:
        raise ValueError("Некорректная конфигурация: " + "; ".join(errors))

    session_logger = SessionLogger(
        logs_dir=settings["logs_dir"],
        log_level=settings["log_level"],
    )

    if base_url:
        source = HttpTextSource(base_url, timeout=settings["http_timeout_s"])
    else:
        source = FileTextSource(base_dir or Path(__file__).parent)

    return PcmExplorer(
        PcmExplorerConfig.from_dict(settings),
        source,
        renderer=TextCurveRenderer() if render else None,
        session_logger=session_logger,
    )


async def main_interactive(base_url: str = ""):
    """Главная функция в режиме ожидания команд пользователя."""
    explorer = create_explorer(base_url)
    await explorer.load_all()

    print("\nPCM Explorer")
    print(explorer.get_status_message())
    print(HELP_TEXT + "\n")

    runner = CommandRunner(explorer)
    try:
        while True:
            line = input("pcm> ").strip()
            if not runner.execute(line):
                break
            print()
    except (KeyboardInterrupt, EOFError):
        print("\n\nЗавершение работы...")


async def main_demo(base_url: str = ""):
    """Демонстрационный режим с предопределёнными командами."""
    explorer = create_explorer(base_url, render=False)
    await explorer.load_all()

    runner = CommandRunner(explorer)
    for command in DEMO_COMMANDS:
        print("\n" + "=" * 80)
        print(f"pcm> {command}")
        print("=" * 80)
        runner.execute(command)


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(
        description="PCM Explorer: каталог материалов с фазовым переходом",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  python main.py                                  # Интерактивный режим (по умолчанию)
  python main.py --demo                           # Демонстрация на примерах
  python main.py --base-url http://host/cryopcm   # Загрузка таблиц по HTTP
        """,
    )
    parser.add_argument("--demo", action="store_true", help="Выполнить демонстрационные команды")
    parser.add_argument("--base-url", default="", help="Базовый URL исходных таблиц")

    args = parser.parse_args()

    try:
        if args.demo:
            asyncio.run(main_demo(args.base_url))
        else:
            asyncio.run(main_interactive(args.base_url))
    except KeyboardInterrupt:
        print("\n\nЗавершение работы пользователем")
