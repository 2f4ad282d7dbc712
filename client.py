# client.py
import argparse
import json
import logging
import sys

import requests

from vacuum.utils.consts import LOG_LEVEL, SERVER_PORT
from vacuum.utils.enums import Direction
from vacuum.utils.logs import configure_logging

logger = logging.getLogger("client")

DEFAULT_URL = f"http://localhost:{SERVER_PORT}/path"
TIMEOUT = 60  # HTTP request timeout in seconds


def parse_move(value):
    """
    Parse "east:10" into {"direction": "east", "steps": 10}
    """
    try:
        direction, steps = value.split(":")
        return {"direction": Direction(direction.lower()).value, "steps": int(steps)}
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected direction:steps, got {value!r}")


def build_request(args):
    if args.file:
        with open(args.file) as f:
            return json.load(f)
    return {"start": {"x": args.x, "y": args.y}, "commands": args.move or []}


def send_path(url, data):
    """
    POST a walk request to the server.

    Returns:
        The decoded JSON response; raises requests.HTTPError on non-2xx.
    """
    logger.debug("Sending %d commands to %s", len(data.get("commands", [])), url)
    response = requests.post(url, json=data, timeout=TIMEOUT)
    response.raise_for_status()
    return response.json()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Send a robot path to the vacuum server.")
    parser.add_argument("--url", default=DEFAULT_URL, help=f"Path endpoint (default: {DEFAULT_URL})")
    parser.add_argument("--file", help="JSON file holding a full request ({\"start\": ..., \"commands\": ...})")
    parser.add_argument("--x", type=int, default=0, help="Start x coordinate")
    parser.add_argument("--y", type=int, default=0, help="Start y coordinate")
    parser.add_argument("--move", type=parse_move, action="append",
                        help="Command as direction:steps, repeatable, e.g. --move east:2 --move north:1")
    args = parser.parse_args(argv)

    configure_logging(LOG_LEVEL)
    try:
        result = send_path(args.url, build_request(args))
    except requests.RequestException as e:
        logger.error("Request failed: %s", e)
        return 1
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
