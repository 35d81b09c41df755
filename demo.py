#!/usr/bin/env python3
'''
Permutation demo
================

Prints, for a cycle `tau` and a transposition `sigma`:

1. the powers `tau ^ i`
2. the products `sigma * tau ^ i`
3. every product `tau ^ j * sigma * tau ^ i`

Usage:
    python demo.py --cycle '(12345)' --transposition '(12)' --powers 5
'''

import argparse
import logging
import sys
from typing import Optional

from groups import Permutation, PermutationError

logger = logging.getLogger(__name__)


def powers_table(tau: Permutation, n: int) -> list[str]:
	return [ f'{tau} ^ {i} = {tau ** i}' for i in range(1, n + 1) ]

def products_table(sigma: Permutation, tau: Permutation, n: int) -> list[str]:
	return [ f'{sigma} * {tau} ^ {i} = {sigma * tau ** i}' for i in range(1, n + 1) ]

def conjugates_table(sigma: Permutation, tau: Permutation, n: int) -> list[str]:
	''' with `j == n - i` and `n` the order of `tau`, each line is a conjugate of `sigma` '''
	return [
		f'{tau} ^ {j} * {sigma} * {tau} ^ {i} = {tau ** j * sigma * tau ** i}'
		for i in range(1, n + 1)
		for j in range(1, n + 1)
	]


def main(argv: Optional[list[str]] = None) -> int:
	parser = argparse.ArgumentParser(
		description='Print powers and conjugates of a permutation given in cycle notation',
	)
	parser.add_argument('--cycle', '-c', default='(12345)',
		help='cycle tau, in cycle notation (default: %(default)s)')
	parser.add_argument('--transposition', '-t', default='(12)',
		help='permutation sigma, in cycle notation (default: %(default)s)')
	parser.add_argument('--powers', '-n', type=int, default=5,
		help='highest power of tau to print (default: %(default)s)')
	parser.add_argument('--verbose', '-v', action='store_true',
		help='enable debug logging')
	args = parser.parse_args(argv)
	if args.powers < 1:
		parser.error('--powers must be at least 1')

	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.INFO,
		format='%(asctime)s [%(levelname)s] %(message)s',
		datefmt='%Y-%m-%d %H:%M:%S',
	)

	try:
		tau = Permutation.parse(args.cycle)
		sigma = Permutation.parse(args.transposition)
	except PermutationError as e:
		logger.error('invalid permutation: %s', e)
		return 1

	logger.info('tau = %s over %s, sigma = %s over %s', tau, tau.range, sigma, sigma.range)
	for line in powers_table(tau, args.powers):
		print(line)
	for line in products_table(sigma, tau, args.powers):
		print(line)
	for line in conjugates_table(sigma, tau, args.powers):
		print(line)
	return 0


if __name__ == '__main__':
	sys.exit(main())
