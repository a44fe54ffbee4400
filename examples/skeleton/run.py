import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from cases import SkeletonCase  # noqa: E402

from enki import ConsoleResultExporter  # noqa: E402


def main() -> int:
    case = SkeletonCase()
    had_failure = case.run()
    with ConsoleResultExporter() as exporter:
        exporter.export_results(case.results())
    return 1 if had_failure else 0


if __name__ == "__main__":
    raise SystemExit(main())
