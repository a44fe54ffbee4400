import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from cases import AssertionsCase  # noqa: E402

from enki import ExportSettings, create_exporter  # noqa: E402


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--format", choices=("text", "xml", "json"), default="text")
    parser.add_argument("--output")
    args = parser.parse_args()

    case = AssertionsCase()
    had_failure = case.run()
    settings = ExportSettings(format=args.format, path=args.output, durations=True)
    with create_exporter(settings) as exporter:
        exporter.export_results(case.results())
    return 1 if had_failure else 0


if __name__ == "__main__":
    raise SystemExit(main())
