from typing import Self
from typing import Optional, Iterator, Iterable, TypeVar, Union
import functools
import logging
import operator
import re

T = TypeVar('T')

logger = logging.getLogger(__name__)

def circular_pairwise(x: Iterable[T]) -> Iterator[tuple[T, T]]:
	''' like pairwise, but with a trailing (last, first) entry '''
	x = iter(x)
	start = next(x)
	e1 = start
	for e2 in x:
		yield (e1, e2)
		e1 = e2
	yield (e1, start)

__all__ = [
	'PermutationError',
	'InvalidRangeError',
	'InvalidPermutationError',
	'DuplicateMappingError',
	'IncompatibleExtensionError',
	'KeyNotFoundError',
	'ParseError',
	'IntRange',
	'Permutation',
]


# ERRORS
# ------

class PermutationError(Exception):
	''' base class for all errors raised by this module '''

class InvalidRangeError(PermutationError, ValueError):
	''' an interval was requested with its upper bound below its lower bound '''

class InvalidPermutationError(PermutationError, ValueError):
	''' the supplied data does not describe a bijection '''

class DuplicateMappingError(InvalidPermutationError):
	''' a cycle mentions the same element more than once '''

class IncompatibleExtensionError(PermutationError, ValueError):
	''' `Permutation.extend_to()` was given a range that doesn't contain the current one '''

class KeyNotFoundError(PermutationError, KeyError):
	''' lookup of an element outside of the permutation's range '''

class ParseError(PermutationError, ValueError):
	''' malformed cycle notation '''


# INTEGER RANGE
# -------------

class IntRange:
	'''
	closed interval `[min, max]` of integers.

	this is the domain (and codomain) of a `Permutation`. instances are immutable
	and hashable; iterating yields every integer of the interval in order.
	'''

	_min: int
	_max: int

	def __init__(self, min: int, max: int):
		if not (isinstance(min, int) and isinstance(max, int)):
			raise TypeError(f'range bounds must be integers, not {type(min)} and {type(max)}')
		if max < min:
			raise InvalidRangeError(f'invalid range: upper bound {max} is below lower bound {min}')
		self._min = min
		self._max = max

	@property
	def min(self) -> int:
		''' lowest integer of the interval (inclusive) '''
		return self._min

	@property
	def max(self) -> int:
		''' highest integer of the interval (inclusive) '''
		return self._max

	def __repr__(self):
		return f'{type(self).__name__}({self.min}, {self.max})'

	def __str__(self):
		return f'[{self.min}, {self.max}]'

	# comparison / hashing

	def _cmpkey(self):
		return (self.min, self.max)

	def __eq__(self, other: object):
		if not isinstance(other, IntRange):
			return NotImplemented
		return self._cmpkey() == other._cmpkey()

	def __hash__(self):
		return hash(self._cmpkey())

	# container protocol

	def __len__(self) -> int:
		return self.max - self.min + 1

	def __iter__(self) -> Iterator[int]:
		return iter(range(self.min, self.max + 1))

	def __contains__(self, x: object) -> bool:
		return isinstance(x, int) and self.min <= x <= self.max

	# operations

	def contains_subrange(self, other: 'IntRange') -> bool:
		''' tests whether `other` lies entirely inside this range '''
		return other.min >= self.min and other.max <= self.max

	def union(self, other: 'IntRange') -> Self:
		''' smallest range covering both ranges (and any gap between them) '''
		return type(self)(min(self.min, other.min), max(self.max, other.max))

	def clone(self) -> Self:
		return type(self)(self.min, self.max)

	def __copy__(self):
		return self.clone()

	def __deepcopy__(self, memo):
		return self.clone()

def _as_range(min: Union[int, IntRange], max: Optional[int]) -> IntRange:
	''' accepts either an `IntRange` or a pair of bounds '''
	if isinstance(min, IntRange):
		if max is not None:
			raise TypeError('an upper bound cannot be passed together with an IntRange')
		return min
	if max is None:
		raise TypeError('missing upper bound')
	return IntRange(min, max)


# PERMUTATION
# -----------

_INTEGER = re.compile(r'-?[0-9]+')

class Permutation:
	'''
	bijection of a closed integer interval (its `range`) onto itself.

	the implemented operation follows usual left action notation, meaning
	`a * b` is equivalent to the composition `a ∘ b` of their associated
	functions (b is performed first, then a). when the operands are defined
	over different ranges, both are first extended with fixed points to the
	union of their ranges.

	the only mutating operation is `extend_to()`, which is why permutations
	aren't hashable.
	'''

	_range: IntRange
	_images: list[int]
	''' image of each element, indexed by `element - range.min` '''

	def __init__(self, images: Iterable[int], start: int = 1):
		'''
		construct a permutation from the list of images: `images[k]` is the image
		of `start + k`. the images must be a rearrangement of the domain.
		'''
		images = list(images)
		if not images:
			raise InvalidPermutationError('a permutation needs at least one element')
		for k in images:
			if not isinstance(k, int):
				raise TypeError(f'object {k!r} is not an int')
		domain = IntRange(start, start + len(images) - 1)
		if sorted(images) != list(domain):
			raise InvalidPermutationError(f'{images} is not a rearrangement of {domain}')
		self._range = domain
		self._images = images

	@classmethod
	def _make(cls, domain: IntRange, images: list[int]) -> Self:
		''' internal constructor, `images` is trusted to be a bijection of `domain` '''
		self = cls.__new__(cls)
		self._range = domain
		self._images = images
		return self

	@property
	def range(self) -> IntRange:
		''' domain (and codomain) of this permutation '''
		return self._range

	# constructing

	@classmethod
	def from_cycle(cls, *numbers: int) -> Self:
		'''
		construct a single cycle, `numbers[0] -> numbers[1] -> ... -> numbers[0]`.

		the range spans from the lowest to the highest number; every integer of
		that range that isn't mentioned is a fixed point.
		'''
		if not numbers:
			raise InvalidPermutationError('a cycle needs at least one element')
		for k in numbers:
			if not isinstance(k, int):
				raise TypeError(f'object {k!r} is not an int')
		domain = IntRange(min(numbers), max(numbers))
		images = list(domain)
		seen = set()
		for i, j in circular_pairwise(numbers):
			if i in seen:
				raise DuplicateMappingError(f'element {i} appears more than once in cycle {numbers}')
			seen.add(i)
			images[i - domain.min] = j
		return cls._make(domain, images)

	@classmethod
	def from_cycles(cls, *cycles: Iterable[int]) -> Self:
		'''
		construct the product of a series of cycles (see `from_cycle()`).

		cycles don't need to be disjoint; like with `*`, the rightmost cycle is
		applied first.
		'''
		if not cycles:
			raise InvalidPermutationError('at least one cycle is required')
		return functools.reduce(operator.mul, (cls.from_cycle(*c) for c in cycles))

	@classmethod
	def rotation(cls, min: int, max: int) -> Self:
		''' the full cycle `min -> min + 1 -> ... -> max -> min` '''
		domain = IntRange(min, max)
		images = [k + 1 for k in domain]
		images[-1] = domain.min
		return cls._make(domain, images)

	@classmethod
	def full_cycle(cls, length: int) -> Self:
		''' the full cycle over `[1, length]` '''
		return cls.rotation(1, length)

	@classmethod
	def identity(cls, min: Union[int, IntRange], max: Optional[int] = None) -> Self:
		''' identity over `[min, max]` (both inclusive), or over the passed `IntRange` '''
		domain = _as_range(min, max).clone()
		return cls._make(domain, list(domain))

	# parsing / formatting

	@classmethod
	def parse(cls, text: str) -> Self:
		'''
		parse cycle notation, such as `(1 3 5)(2 4)` or the compact `(135)(24)`.

		a group containing whitespace holds whitespace separated integers, which
		may have several digits or a minus sign. a group without whitespace holds
		one decimal digit per character. groups need not be disjoint: they are
		multiplied together, so the rightmost group is applied first.
		'''
		if not isinstance(text, str):
			raise TypeError(f'cycle notation must be a str, not {type(text)}')
		source = text.strip()
		if not (source.startswith('(') and source.endswith(')')):
			raise ParseError(f'cycle notation must start with ( and end with ): {text!r}')
		cycles = []
		# source starts with (, so the first piece is always empty
		for segment in (s.strip() for s in source.split('(')[1:]):
			if not segment:
				raise ParseError(f'stray ( in {text!r}')
			if not segment.endswith(')'):
				raise ParseError(f'unclosed cycle {segment!r} in {text!r}')
			cycles.append(_parse_cycle(segment[:-1], text))
		logger.debug('parsed %d cycle(s) from %r', len(cycles), text)
		return cls.from_cycles(*cycles)

	def __str__(self):
		'''
		canonical cycle notation: non-trivial cycles in the order they are
		discovered scanning the range, followed by each fixed point as a 1-cycle.
		the identity is spelled out in full, e.g. `(1)(2)(3)`, so that the
		range survives a round trip through `parse()`.

		a fixed point other than a single digit gets a trailing space, e.g.
		`(12 )`, since `parse()` reads `(12)` as the compact cycle `(1 2)`.
		'''
		def format_cycle(c: list[int]) -> str:
			if len(c) == 1 and not 0 <= c[0] <= 9:
				return f'({c[0]} )'
			return '(' + ' '.join(map(str, c)) + ')'
		cycles = self.cycles()
		moved = [c for c in cycles if len(c) != 1]
		fixed = [c for c in cycles if len(c) == 1]
		return ''.join(map(format_cycle, moved + fixed))

	def __repr__(self):
		return f'{type(self).__name__}({self._images!r}, start={self._range.min})'

	# mapping protocol

	def __getitem__(self, x: int) -> int:
		''' image of element `x` '''
		if not isinstance(x, int):
			raise TypeError(f'permutation elements must be integers, not {type(x)}')
		if x not in self._range:
			raise KeyNotFoundError(x)
		return self._images[x - self._range.min]

	def __len__(self) -> int:
		return len(self._images)

	def __iter__(self) -> Iterator[int]:
		return iter(self._range)

	def __contains__(self, x: object) -> bool:
		return x in self._range

	def items(self) -> Iterator[tuple[int, int]]:
		''' yields `(element, image)` pairs in range order '''
		return zip(self._range, self._images)

	# comparison

	def __eq__(self, other: object):
		'''
		permutations are equal if they have the same range and the same images.
		a permutation is never equal to an extension of it to a larger range.
		'''
		if not isinstance(other, Permutation):
			return NotImplemented
		return self._range == other._range and self._images == other._images

	__hash__ = None  # mutable through extend_to()

	def is_identity(self) -> bool:
		return all(i == j for i, j in self.items())

	# core operations

	def multiply(self, other: 'Permutation') -> Self:
		'''
		composition `self ∘ other`, i.e. `result[i] == self[other[i]]`. the result
		is defined over the union of both ranges; the operands are left untouched.
		'''
		domain = self._range.union(other._range)
		left, right = self.clone(), other.clone()
		left.extend_to(domain)
		right.extend_to(domain)
		return type(self)._make(domain, [ left[right[i]] for i in domain ])

	def __mul__(self, other: 'Permutation') -> Self:
		if isinstance(other, Permutation):
			return self.multiply(other)
		return NotImplemented

	def power(self, x: int) -> Self:
		'''
		the result of applying this permutation `x` times to every element of its
		range. `x == 0` yields the identity over the same range, and a negative `x`
		applies the inverse `-x` times.
		'''
		if not isinstance(x, int):
			raise TypeError(f'exponent must be an integer, not {type(x)}')
		base = self._range.min
		images = list(self._range)
		for cycle in self.cycles_iter():
			for i, k in enumerate(cycle):
				images[k - base] = cycle[(i + x) % len(cycle)]
		return type(self)._make(self._range.clone(), images)

	def __pow__(self, other: int) -> Self:
		if not isinstance(other, int):
			return NotImplemented
		return self.power(other)

	@property
	def inv(self) -> Self:
		''' inverse element, over the same range. equivalent to the notation `x ** -1` '''
		base = self._range.min
		images = list(self._range)
		for i, j in self.items():
			images[j - base] = i
		return type(self)._make(self._range.clone(), images)

	def conj(self, other: 'Permutation') -> Self:
		''' (left) conjugate an element using this element: equivalent to `self.inv * other * self` '''
		return self.inv * other * self

	def conj_by(self, other: 'Permutation') -> Self:
		''' (left) conjugate this element by `other`: equivalent to `other.inv * self * other` '''
		return other.inv * self * other

	# domain

	def extend_to(self, min: Union[int, IntRange], max: Optional[int] = None) -> None:
		'''
		widens the range to `[min, max]` (or to the passed `IntRange`) in place,
		adding a fixed point for each new element. existing images are kept.

		the new range must contain the current one, otherwise
		`IncompatibleExtensionError` is raised and nothing changes.
		'''
		target = _as_range(min, max)
		current = self._range
		if not target.contains_subrange(current):
			raise IncompatibleExtensionError(f'cannot extend a permutation over {current} to {target}')
		if target == current:
			return
		head = list(range(target.min, current.min))
		tail = list(range(current.max + 1, target.max + 1))
		self._images = head + self._images + tail
		self._range = target.clone()
		logger.debug('extended permutation from %s to %s', current, target)

	def clone(self) -> Self:
		return type(self)._make(self._range.clone(), list(self._images))

	def __copy__(self):
		return self.clone()

	def __deepcopy__(self, memo):
		return self.clone()

	# cycle decomposition

	def cycles_iter(self) -> Iterator[list[int]]:
		''' like cycles(), but yields an iterator over the discovered cycles '''
		base = self._range.min
		seen = 0
		for start in self._range:
			if seen >> (start - base) & 1:
				continue
			# extract cycle
			cursor, cycle = start, []
			while True:
				cycle.append(cursor)
				seen |= 1 << (cursor - base)
				cursor = self._images[cursor - base]
				if cursor == start: break
			yield cycle

	def cycles(self, fixpoints=True) -> list[list[int]]:
		'''
		expresses this permutation as a product of disjoint cycles.

		each cycle begins with its lowest element, and cycles are ordered
		by that element (i.e. in the order a scan of the range finds them).

		parameters:
		 - fixpoints: if False, filter out 1-cycles (fixed points).
		'''
		cycles = self.cycles_iter()
		if not fixpoints:
			cycles = filter(lambda x: len(x) != 1, cycles)
		return list(cycles)

def _parse_cycle(body: str, text: str) -> list[int]:
	''' parses the inside of a single parenthesized group; `text` is only used for error messages '''
	if not body:
		raise ParseError(f'empty cycle in {text!r}')
	if any(c.isspace() for c in body):
		tokens = body.split()
		for token in tokens:
			if not _INTEGER.fullmatch(token):
				raise ParseError(f'{token!r} is not an integer (in {text!r})')
		return [ int(token) for token in tokens ]
	for c in body:
		if c not in '0123456789':
			raise ParseError(f'{c!r} is not a decimal digit (in {text!r})')
	return [ int(c) for c in body ]
