from datetime import datetime
from enum import Enum
from pathlib import Path

from argtap import (
    Argument,
    ArgumentParser,
    ConstArgument,
    MultiValueArgument,
    SwitchArgument,
    ValueArgument,
    ValueCell,
)
from argtap.utils import run_parser


class Place(Enum):
    """Enum for different places."""

    NEW_YORK = "New York"
    SAN_FRANCISCO = "San Francisco"
    LONDON = "London"

    def __str__(self):
        return self.value


verbose = Argument("Increase &verbosity", autoflag=True).set_max(3)
place = ValueArgument(
    "Where to run", "p", "place", default=Place.NEW_YORK, value_name="place"
)
region = ValueArgument("Deployment region", "r", "region", default="us-east-1")
since = ValueArgument("Only items changed after this date", name="since", type=datetime)
color = SwitchArgument("Toggle %colored output", autoflag=True)

mode = ValueCell("normal")
fast = ConstArgument("Run in fast mode", "f", "fast", storage=mode, const="fast")

numbers = MultiValueArgument("Numbers to sum", "n", "number", type=int)
paths = MultiValueArgument("Files to process", type=Path).set_value_name("path")

parser = ArgumentParser(
    verbose, place, region, since, color, fast, numbers, paths, program_name="demo"
)


if __name__ == "__main__":
    run_parser(parser)
    print(f"verbosity: {verbose.count}")
    print(f"place:     {place.value}")
    print(f"region:    {region.value}")
    print(f"since:     {since.value}")
    print(f"color:     {color.value}")
    print(f"mode:      {mode.value}")
    print(f"sum:       {sum(numbers.value)}")
    print(f"paths:     {[str(path) for path in paths.value]}")
