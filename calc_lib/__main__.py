"""
Evaluate algebraic expressions from the command line:

    py -m calc_lib "1 + 2 * 3"

or, with no expression, read them from standard input one line at a time.

    py -m calc_lib -h

will explain all the arguments.
"""
from calc_lib.cmdline import main

main()
