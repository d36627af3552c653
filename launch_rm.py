# coding: utf-8
"""
Launch rmclone from the command line, e.g.

    launch_rm.py -r -v build *.log
"""
import sys

from rmclone.bin import rm

if __name__ == '__main__':
    rm.main(sys.argv[1:])
