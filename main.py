from rich.pretty import pprint

from argot import *

__prog__ = "argot-demo"


if __name__ == '__main__':
    args = parse(params=("-j", "--out"), mode=Mode.DEFAULT | Mode.SINGLE_DASH_IS_MULTIFLAG)
    pprint(args)

    if not (jobs := args.param("j", "jobs", default=1).convert(int)):
        trigger(jobs.fault, shell=True, colorful=True, fancy=True)
    else:
        pprint(jobs)
