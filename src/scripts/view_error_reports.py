#!/usr/bin/env python3
"""
Скрипт для просмотра error отчетов.
Показывает последние ошибки обращения к upstream и обрывов стриминга
из errors.json в директории логов.
"""

import json
import sys
from collections import Counter
from pathlib import Path
from datetime import datetime, timedelta
from typing import List, Dict, Any, Optional

from core.config import settings


class ErrorReportsViewer:
    """Класс для просмотра error отчетов"""

    def __init__(self, logs_dir: Path = Path(settings.app.logs_dir)):
        self.logs_dir = logs_dir
        self.errors_json = logs_dir / "errors.json"

    def get_recent_errors(self, hours: int = 24, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
        """Получить ошибки за последние N часов, новые сверху"""
        errors = []
        cutoff_time = (now or datetime.now()) - timedelta(hours=hours)

        if not self.errors_json.exists():
            return errors

        with open(self.errors_json, 'r', encoding='utf-8') as f:
            for line in f:
                if not line.strip():
                    continue
                try:
                    error_data = json.loads(line)
                    error_time = datetime.fromisoformat(error_data['timestamp'])
                except (json.JSONDecodeError, KeyError, ValueError):
                    continue
                if error_time > cutoff_time:
                    errors.append(error_data)

        errors.sort(key=lambda x: x['timestamp'], reverse=True)
        return errors

    @staticmethod
    def service_of(error: Dict[str, Any]) -> str:
        """Сервис из контекста ErrorReporter: VxTwitter, MediaOrigin или stream"""
        context = error.get('context') or {}
        if context.get('service'):
            return context['service']
        if 'media_url' in context:
            return 'stream'
        return error.get('logger', 'UNKNOWN')

    def print_error_summary(self, hours: int = 24) -> None:
        """Вывести сводку по ошибкам"""
        errors = self.get_recent_errors(hours)

        if not errors:
            print(f"✅ За последние {hours} часов ошибок не найдено!")
            return

        print(f"🚨 Найдено {len(errors)} ошибок за последние {hours} часов:")
        print("=" * 80)

        by_service = Counter(self.service_of(error) for error in errors)
        for service, count in by_service.most_common():
            print(f"\n🔴 {service}: {count} ошибок")

            for error in [e for e in errors if self.service_of(e) == service][:5]:
                context = error.get('context') or {}
                print(f"  📅 {error.get('timestamp', 'UNKNOWN')}")
                if context.get('status_code'):
                    print(f"  🔢 status={context['status_code']}")
                print(f"  💬 {error.get('message', 'No message')[:100]}")
                print()

    def print_detailed_error(self, error_index: int = 0, hours: int = 24) -> None:
        """Вывести детальную информацию об ошибке"""
        errors = self.get_recent_errors(hours)

        if not errors:
            print("Ошибок не найдено!")
            return

        if error_index >= len(errors):
            print(f"Индекс {error_index} вне диапазона. Доступно {len(errors)} ошибок.")
            return

        error = errors[error_index]

        print("📋 ДЕТАЛЬНАЯ ИНФОРМАЦИЯ ОБ ОШИБКЕ")
        print("=" * 80)

        for key, value in error.items():
            if key == 'context' and value:
                print("CONTEXT:")
                for ctx_key, ctx_value in value.items():
                    print(f"  {ctx_key}: {ctx_value}")
            elif key == 'exception' and value:
                print(f"{key.upper()}:")
                print(f"  {value}")
            else:
                print(f"{key.upper()}: {value}")

    def show_help(self) -> None:
        """Показать справку"""
        print("📊 ПРОСМОТР ERROR ОТЧЕТОВ")
        print("=" * 50)
        print("Использование:")
        print("  python -m scripts.view_error_reports summary [часы]  - сводка ошибок")
        print("  python -m scripts.view_error_reports detail [индекс] [часы]  - детальная ошибка")
        print("  python -m scripts.view_error_reports help  - эта справка")


def _int_arg(index: int, default: int, name: str) -> Optional[int]:
    if len(sys.argv) <= index:
        return default
    try:
        return int(sys.argv[index])
    except ValueError:
        print(f"Ошибка: {name} должен быть числом")
        return None


def main():
    viewer = ErrorReportsViewer()

    if len(sys.argv) < 2:
        viewer.print_error_summary()
        return

    command = sys.argv[1].lower()

    if command == "summary":
        hours = _int_arg(2, 24, "параметр часов")
        if hours is not None:
            viewer.print_error_summary(hours)

    elif command == "detail":
        error_index = _int_arg(2, 0, "индекс")
        hours = _int_arg(3, 24, "параметр часов")
        if error_index is not None and hours is not None:
            viewer.print_detailed_error(error_index, hours)

    elif command == "help":
        viewer.show_help()

    else:
        print(f"Неизвестная команда: {command}")
        viewer.show_help()


if __name__ == "__main__":
    main()
