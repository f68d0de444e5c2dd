"""
Throttling Visualizer: Main Entry Point

Configures one bucket on the remote limiter, fires a series of requests
at it and prints the locally simulated state in between.
"""
import sys
import asyncio
import argparse
from .core.config import VisualizerConfig
from .core.logger import configure_logging
from .limiter.profile import AlgorithmKind
from .presentation import ConsoleAdapter
from .session import VisualizerSession

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Token bucket / leaky bucket throttling visualizer"
    )
    parser.add_argument(
        "--algorithm",
        choices=[kind.value for kind in AlgorithmKind],
        default=AlgorithmKind.TOKEN_BUCKET.value,
        help="Which limiter to visualize"
    )
    parser.add_argument(
        "--capacity",
        type=int,
        required=True,
        help="Bucket capacity (tokens or queued requests)"
    )
    parser.add_argument(
        "--rate",
        type=float,
        required=True,
        help="Refill or leak rate per second"
    )
    parser.add_argument(
        "--requests",
        type=int,
        default=5,
        help="Number of requests to send after configuring"
    )
    parser.add_argument(
        "--spacing",
        type=float,
        default=0.5,
        help="Seconds between requests"
    )
    parser.add_argument(
        "--linger",
        type=float,
        default=2.0,
        help="Seconds to keep simulating after the last request"
    )
    parser.add_argument(
        "--render-interval",
        type=float,
        default=0.5,
        help="Minimum seconds between printed bucket lines"
    )
    parser.add_argument(
        "--base-url",
        help="Remote limiter base URL (default: $THROTTLEVIS_BASE_URL or http://localhost:8888)"
    )
    parser.add_argument(
        "--log-level",
        help="structlog level (default: $THROTTLEVIS_LOG_LEVEL or INFO)"
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit diagnostics as JSON instead of console lines"
    )
    return parser

async def run(args: argparse.Namespace, config: VisualizerConfig) -> int:
    async with VisualizerSession(args.algorithm, config) as session:
        console = ConsoleAdapter(session.profile, min_interval=args.render_interval)
        console.print_header(args.capacity, args.rate)
        session.attach(console)

        result = await session.configure(args.capacity, args.rate)
        if not result.ok:
            return 1

        for _ in range(args.requests):
            await session.send_request()
            await asyncio.sleep(args.spacing)

        await asyncio.sleep(args.linger)
    return 0

def main(argv=None):
    args = build_parser().parse_args(argv)
    config = VisualizerConfig.from_env(base_url=args.base_url, log_level=args.log_level)
    configure_logging(config.log_level, json_logs=args.json_logs)

    try:
        sys.exit(asyncio.run(run(args, config)))
    except KeyboardInterrupt:
        sys.exit(130)

if __name__ == "__main__":
    main()
