"""Main script for running the misinformation detector interactively."""

import asyncio

from .domain.errors import MisinfoDetectorError
from .domain.models.analysis import AnalysisResult
from .infrastructure.config import AppConfig, configure_logging
from .infrastructure.dependencies import ServiceContainer


def format_result(result: AnalysisResult) -> str:
    """Render an analysis result for the terminal."""
    lines = [
        f"Verdict: {result.verdict.value}",
        f"Confidence: {result.confidence}%",
        "",
        f"Explanation: {result.explanation}",
    ]

    if result.key_points:
        lines.append("\nKey points:")
        lines.extend(f"• {point}" for point in result.key_points)

    if result.fact_checks:
        lines.append("\nFact checks:")
        for i, fact_check in enumerate(result.fact_checks, 1):
            source = f" ({fact_check.source})" if fact_check.source else ""
            lines.append(f"{i}. [{fact_check.status.value}] {fact_check.claim}{source}")

    if result.sources:
        lines.append("\nSources:")
        lines.extend(f"- {source}" for source in result.sources)

    return "\n".join(lines)


async def main():
    """Run the detector."""
    config = AppConfig.from_env()
    configure_logging(config.log_level)

    print("Misinformation Detector - claim extraction and verification")
    print("-----------------------------------------------------------")

    container = ServiceContainer(config)
    try:
        service = await container.get_fact_checking_service()

        while True:
            text = input("\nEnter text to analyze (or 'quit' to exit): ")
            if text.lower() in ('quit', 'exit', 'q'):
                break

            print("\nAnalyzing...")
            try:
                result = await service.run(text)
                print("\nResults:")
                print(format_result(result))
            except MisinfoDetectorError as e:
                print(f"\nError analyzing text: {e}")

    except MisinfoDetectorError as e:
        print(f"\n{e}")
    finally:
        await container.shutdown()


def run():
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
