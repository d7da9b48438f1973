"""
Relations between arguments built with operators.

    python constraint_examples.py --json out.txt
    python constraint_examples.py --json --yaml out.txt    # one format only
    python constraint_examples.py -u me out.txt            # --user needs --password
    python constraint_examples.py -o -u me -P pw out.txt  # offline excludes --user
"""
from argtap import Argument, ArgumentParser, ArgumentSet, ValueArgument
from argtap.utils import run_parser

as_json = Argument("Write $json", autoflag=True)
as_yaml = Argument("Write $yaml", autoflag=True)
as_csv = Argument("Write $csv", autoflag=True)

user = ValueArgument("Login user", "u", "user", value_name="name")
password = ValueArgument("Login password", "P", "password", value_name="secret")
offline = Argument("Never touch the network", "o", "offline")
output = ValueArgument("Output file", required=True, value_name="file")

parser = ArgumentParser(output, program_name="export")
parser.add(ArgumentSet("Formats", as_json, as_yaml, as_csv))
parser.add(ArgumentSet("Connection", user, password, offline))

parser.add_constraint(as_json ^ as_yaml ^ as_csv)
parser.add_constraint(user > password)
parser.add_constraint(-(offline ^ user))


if __name__ == "__main__":
    run_parser(parser)
    print(parser.help())
