import copy
import itertools
import math

import pytest

from groups import *
from scalars import Real, Complex, Imaginary
from coordinates import Point3, Vector3, Cylindrical3
from linear import Vector
import demo

def verify_permutation(p: Permutation):
	''' checks the representation invariants of `p` '''
	assert len(p) == len(p.range)
	assert list(p) == list(p.range)
	assert sorted(j for _, j in p.items()) == list(p.range)
	for i in p:
		assert p[i] in p.range
	assert sum(map(len, p.cycles())) == len(p)

TAU = '(12345)'
SIGMA = '(12)'

SAMPLES = [
	Permutation.parse('(12)'),
	Permutation.parse('(1 3 5)(2 4)'),
	Permutation.rotation(2, 5),
	Permutation.from_cycle(3, 6),
	Permutation.identity(0, 2),
	Permutation([1, -1, 0], start=-1),
]


# INTEGER RANGE
# -------------

def test_range_bounds():
	r = IntRange(2, 5)
	assert (r.min, r.max) == (2, 5)
	assert len(r) == 4
	assert list(r) == [2, 3, 4, 5]
	assert 2 in r and 5 in r
	assert 1 not in r and 6 not in r
	assert len(IntRange(3, 3)) == 1
	with pytest.raises(InvalidRangeError):
		IntRange(5, 4)
	with pytest.raises(TypeError):
		IntRange(1.0, 2)

def test_range_subrange_and_union():
	r = IntRange(1, 5)
	assert r.contains_subrange(IntRange(2, 4))
	assert r.contains_subrange(r)
	assert not r.contains_subrange(IntRange(0, 3))
	assert not IntRange(2, 4).contains_subrange(r)
	assert IntRange(1, 2).union(IntRange(4, 6)) == IntRange(1, 6)
	assert IntRange.union(IntRange(3, 9), IntRange(-2, 4)) == IntRange(-2, 9)

def test_range_clone():
	r = IntRange(1, 5)
	c = r.clone()
	assert c == r and c is not r
	assert copy.deepcopy(r) == r
	assert hash(c) == hash(r)
	assert repr(r) == 'IntRange(1, 5)'
	assert str(r) == '[1, 5]'


# CONSTRUCTION
# ------------

def test_from_cycle():
	p = Permutation.from_cycle(3, 1, 5)
	verify_permutation(p)
	assert p.range == IntRange(1, 5)
	assert (p[3], p[1], p[5]) == (1, 5, 3)
	assert (p[2], p[4]) == (2, 4)
	assert str(p) == '(1 5 3)(2)(4)'

def test_from_cycle_single_element():
	p = Permutation.from_cycle(7)
	assert p.range == IntRange(7, 7)
	assert p.is_identity()
	assert str(p) == '(7)'

def test_from_cycle_repeated_element():
	with pytest.raises(InvalidPermutationError):
		Permutation.from_cycle(1, 2, 1)
	with pytest.raises(DuplicateMappingError):
		Permutation.from_cycle(4, 4)
	with pytest.raises(InvalidPermutationError):
		Permutation.from_cycle()

def test_from_cycles():
	assert Permutation.from_cycles([1, 2], [2, 3]) == Permutation.parse('(1 2)') * Permutation.parse('(2 3)')
	assert str(Permutation.from_cycles([1, 3, 5], [2, 4])) == '(1 3 5)(2 4)'
	with pytest.raises(InvalidPermutationError):
		Permutation.from_cycles()

def test_images_constructor():
	p = Permutation([2, 3, 1])
	verify_permutation(p)
	assert p.range == IntRange(1, 3)
	assert str(p) == '(1 2 3)'
	assert Permutation([0, 1], start=0).is_identity()
	with pytest.raises(InvalidPermutationError):
		Permutation([1, 1, 2])
	with pytest.raises(InvalidPermutationError):
		Permutation([1, 2, 4])
	with pytest.raises(InvalidPermutationError):
		Permutation([])
	with pytest.raises(TypeError):
		Permutation([1, '2'])

def test_rotation():
	p = Permutation.rotation(3, 6)
	verify_permutation(p)
	assert [p[i] for i in p] == [4, 5, 6, 3]
	assert str(p) == '(3 4 5 6)'
	assert Permutation.rotation(2, 2).is_identity()
	with pytest.raises(InvalidRangeError):
		Permutation.rotation(5, 4)

def test_full_cycle():
	assert Permutation.full_cycle(5) == Permutation.parse(TAU)
	assert Permutation.full_cycle(5) == Permutation.rotation(1, 5)
	with pytest.raises(InvalidRangeError):
		Permutation.full_cycle(0)

def test_identity_is_inclusive():
	p = Permutation.identity(1, 5)
	verify_permutation(p)
	assert len(p) == 5
	assert p[5] == 5
	assert p.is_identity()
	assert str(p) == '(1)(2)(3)(4)(5)'
	assert Permutation.identity(IntRange(1, 5)) == p
	with pytest.raises(InvalidRangeError):
		Permutation.identity(3, 2)


# MAPPING
# -------

def test_indexing():
	p = Permutation.parse(TAU)
	assert [p[i] for i in range(1, 6)] == [2, 3, 4, 5, 1]
	with pytest.raises(KeyNotFoundError):
		p[0]
	with pytest.raises(KeyError):
		p[6]
	with pytest.raises(TypeError):
		p['1']
	assert 3 in p and 6 not in p
	assert dict(p.items()) == {1: 2, 2: 3, 3: 4, 4: 5, 5: 1}

def test_cycles():
	p = Permutation.parse('(1 3 5)(2 4)')
	assert p.cycles() == [[1, 3, 5], [2, 4]]
	q = Permutation.parse('(2 4)(6)')
	assert q.cycles() == [[2, 4], [3], [5], [6]]
	assert q.cycles(fixpoints=False) == [[2, 4]]
	assert Permutation.identity(1, 3).cycles(fixpoints=False) == []


# ALGEBRA
# -------

def test_multiply_is_right_to_left():
	a, b = Permutation.parse('(12)'), Permutation.parse('(23)')
	assert str(a * b) == '(1 2 3)'
	assert str(b * a) == '(1 3 2)'
	assert Permutation.multiply(a, b) == a * b
	assert a.multiply(b) == a * b

def test_multiply_unifies_ranges():
	a, b = Permutation.parse('(12)'), Permutation.rotation(4, 6)
	c = a * b
	verify_permutation(c)
	assert c.range == IntRange(1, 6)
	assert str(c) == '(1 2)(4 5 6)(3)'
	# operands are left untouched
	assert a.range == IntRange(1, 2)
	assert b.range == IntRange(4, 6)

def test_multiply_rejects_other_types():
	with pytest.raises(TypeError):
		Permutation.parse(TAU) * 3

def test_scenario_product():
	sigma, tau = Permutation.parse(SIGMA), Permutation.parse(TAU)
	assert str(sigma * tau ** 2) == '(1 3 5)(2 4)'

def test_associativity():
	for p, q, r in itertools.product(SAMPLES, repeat=3):
		assert (p * q) * r == p * (q * r)

def test_identity_is_neutral():
	for p in SAMPLES:
		e = Permutation.identity(p.range)
		assert p * e == p
		assert e * p == p

def test_power_basics():
	for p in SAMPLES:
		assert p ** 0 == Permutation.identity(p.range)
		assert p ** 1 == p
		assert p ** 2 == p * p

def test_power_is_repeated_application():
	p = Permutation.parse('(1 2)(3 4 5)')
	for n in range(8):
		q = p ** n
		for i in p:
			k = i
			for _ in range(n):
				k = p[k]
			assert q[i] == k

def test_tau_powers():
	tau = Permutation.parse(TAU)
	assert str(tau ** 2) == '(1 3 5 2 4)'
	assert tau ** 5 == Permutation.identity(1, 5)
	assert (tau ** 5).is_identity()
	assert tau ** 7 == tau ** 2

def test_negative_power():
	tau = Permutation.parse(TAU)
	assert tau ** -1 == tau.inv
	assert str(tau ** -1) == '(1 5 4 3 2)'
	assert (tau ** -1 * tau).is_identity()
	assert tau ** -3 == tau ** 2
	with pytest.raises(TypeError):
		tau ** 1.5
	with pytest.raises(TypeError):
		tau.power('2')

def test_inverse():
	for p in SAMPLES:
		assert (p * p.inv).is_identity()
		assert p.inv.range == p.range

def test_conjugates_of_transposition():
	sigma, tau = Permutation.parse(SIGMA), Permutation.parse(TAU)
	conjugates = [ sigma.conj_by(tau ** i) for i in range(1, 6) ]
	assert list(map(str, conjugates)) == [
		'(1 5)(2)(3)(4)',
		'(4 5)(1)(2)(3)',
		'(3 4)(1)(2)(5)',
		'(2 3)(1)(4)(5)',
		'(1 2)(3)(4)(5)',
	]
	assert len(set(map(str, conjugates))) == 5
	for i, c in enumerate(conjugates, start=1):
		[(a, b)] = c.cycles(fixpoints=False)
		assert (b - a) % 5 in (1, 4)
		assert c == (tau ** (5 - i)) * sigma * (tau ** i)
		assert c == (tau ** i).conj(sigma)


# EQUALITY / EXTENSION
# --------------------

def test_equality():
	p = Permutation.parse('(1 3 5)(2 4)')
	q = Permutation.parse('(135)(24)')
	r = Permutation([3, 4, 5, 2, 1])
	assert p == p
	assert p == q and q == p
	assert q == r and p == r
	assert p != Permutation.parse(TAU)
	assert p != '(1 3 5)(2 4)'
	with pytest.raises(TypeError):
		hash(p)

def test_equality_respects_range():
	p = Permutation.parse('(12)')
	q = p.clone()
	q.extend_to(1, 3)
	assert p != q and q != p
	assert Permutation.identity(1, 3) != Permutation.identity(1, 4)

def test_is_identity():
	assert Permutation.identity(-2, 2).is_identity()
	assert not Permutation.parse(SIGMA).is_identity()
	assert (Permutation.parse(SIGMA) * Permutation.parse(SIGMA)).is_identity()

def test_extend_to():
	p = Permutation.parse('(23)')
	assert p.range == IntRange(2, 3)
	p.extend_to(1, 5)
	verify_permutation(p)
	assert p.range == IntRange(1, 5)
	assert (p[1], p[2], p[3], p[4], p[5]) == (1, 3, 2, 4, 5)
	q = p.clone()
	p.extend_to(IntRange(1, 5))
	assert p == q

def test_extend_to_is_idempotent():
	p, q = Permutation.parse('(23)'), Permutation.parse('(23)')
	p.extend_to(0, 6)
	q.extend_to(0, 6)
	q.extend_to(0, 6)
	assert p == q

def test_extend_to_rejects_smaller_range():
	p = Permutation.rotation(2, 5)
	before = p.clone()
	with pytest.raises(IncompatibleExtensionError):
		p.extend_to(3, 5)
	with pytest.raises(IncompatibleExtensionError):
		p.extend_to(IntRange(3, 8))
	with pytest.raises(InvalidRangeError):
		p.extend_to(6, 1)
	with pytest.raises(TypeError):
		p.extend_to(1)
	assert p == before

def test_clone_is_independent():
	p = Permutation.parse(TAU)
	for c in (p.clone(), copy.copy(p), copy.deepcopy(p)):
		assert c == p and c is not p
		c.extend_to(0, 9)
		assert p.range == IntRange(1, 5)


# PARSING / FORMATTING
# --------------------

def test_parse_forms():
	assert Permutation.parse('(1 2 3)') == Permutation.parse('(123)')
	p = Permutation.parse('(10 11 12)')
	assert p.range == IntRange(10, 12)
	assert (p[10], p[11], p[12]) == (11, 12, 10)
	assert str(Permutation.parse('(-1 0 1)')) == '(-1 0 1)'
	assert Permutation.parse(' (1 2)  (3 4) ') == Permutation.parse('(12)(34)')
	assert Permutation.parse('(1  2 )') == Permutation.parse('(12)')

def test_parse_composes_right_to_left():
	assert str(Permutation.parse('(12)(23)')) == '(1 2 3)'
	assert str(Permutation.parse('(12)(23)(34)')) == '(1 2 3 4)'
	assert Permutation.parse('(12)(23)(34)') == Permutation.parse('(12)') * Permutation.parse('(23)') * Permutation.parse('(34)')

@pytest.mark.parametrize('text', [
	'1 2)',
	'(1 2',
	'(1 a)',
	'(1a)',
	'(1.5 2)',
	'()',
	'( )',
	'(1 2(3)',
	'(1 2))',
	'((12)',
	'(1 2)((3 4)',
	'(1 2) ( (3 4)',
	'',
])
def test_parse_errors(text):
	with pytest.raises(ParseError):
		Permutation.parse(text)

def test_parse_repeated_element():
	with pytest.raises(DuplicateMappingError):
		Permutation.parse('(121)')
	with pytest.raises(TypeError):
		Permutation.parse(12)

@pytest.mark.parametrize('text', [
	'(1 3 5)(2 4)',
	'(1)(2)(3)',
	'(1 5 3)(2)(4)',
	'(0 9)(1 2 3)(4)(5)(6)(7)(8)',
	'(1 2)(4 5 6)(3)',
])
def test_canonical_strings_are_fixed(text):
	assert str(Permutation.parse(text)) == text

def test_round_trip():
	for images in itertools.permutations(range(1, 5)):
		p = Permutation(images)
		assert Permutation.parse(str(p)) == p
	for p in SAMPLES:
		assert Permutation.parse(str(p)) == p

def test_round_trip_multi_digit_fixed_points():
	p = Permutation.parse('(1 12)')
	assert p.range == IntRange(1, 12)
	assert str(p) == '(1 12)(2)(3)(4)(5)(6)(7)(8)(9)(10 )(11 )'
	assert Permutation.parse(str(p)) == p
	q = Permutation.identity(-2, 0)
	assert str(q) == '(-2 )(-1 )(0)'
	assert Permutation.parse(str(q)) == q
	r = Permutation([1, -1, 0], start=-1)
	assert Permutation.parse(str(r)) == r
	s = Permutation.parse('(9 11)')
	assert str(s) == '(9 11)(10 )'
	assert Permutation.parse(str(s)) == s

def test_repr():
	for p in SAMPLES:
		assert eval(repr(p), {'Permutation': Permutation}) == p
	assert repr(Permutation.parse('(12)')) == 'Permutation([2, 1], start=1)'


# DEMO
# ----

def test_demo_tables():
	sigma, tau = Permutation.parse(SIGMA), Permutation.parse(TAU)
	assert demo.powers_table(tau, 2) == [
		'(1 2 3 4 5) ^ 1 = (1 2 3 4 5)',
		'(1 2 3 4 5) ^ 2 = (1 3 5 2 4)',
	]
	assert demo.products_table(sigma, tau, 2)[1] == '(1 2) * (1 2 3 4 5) ^ 2 = (1 3 5)(2 4)'
	table = demo.conjugates_table(sigma, tau, 5)
	assert len(table) == 25
	assert table[3] == '(1 2 3 4 5) ^ 4 * (1 2) * (1 2 3 4 5) ^ 1 = (1 5)(2)(3)(4)'

def test_demo_main(capsys):
	assert demo.main(['--powers', '2']) == 0
	lines = capsys.readouterr().out.splitlines()
	assert len(lines) == 2 + 2 + 4
	assert lines[0] == '(1 2 3 4 5) ^ 1 = (1 2 3 4 5)'

def test_demo_invalid_argument():
	assert demo.main(['--cycle', '(1 2']) == 1
	with pytest.raises(SystemExit):
		demo.main(['--powers', '0'])


# SCALARS
# -------

def test_real():
	assert Real(2) + 3 == Real(5)
	assert 3 - Real(1) == Real(2)
	assert Real(3) * Real(2) == 6
	assert 1 / Real(4) == 0.25
	assert -Real(2) == -2
	assert Real(1) < 2 and Real(3) >= Real(3)
	assert float(Real(2.5)) == 2.5 and int(Real(2.5)) == 2
	assert str(Real(2.5)) == '2.5'
	assert Real(Real(2)) == Real(2)
	assert hash(Real(2)) == hash(2)
	with pytest.raises(ZeroDivisionError):
		Real(1) / 0
	with pytest.raises(TypeError):
		Real('1')

def test_complex_arithmetic():
	a, b = Complex(1, 2), Complex(3, 4)
	assert a + b == Complex(4, 6)
	assert b - a == Complex(2, 2)
	assert a * b == Complex(-5, 10)
	assert Complex(-5, 10) / b == a
	assert 1 / Complex.I == Complex(0, -1)
	assert Complex.I * Complex.I == -1
	assert 2 * a == Complex(2, 4) and a + 1 == Complex(2, 2)
	assert Real(1) + a == Complex(2, 2)
	assert -a == Complex(-1, -2)
	assert a.conjugate() == Complex(1, -2)
	with pytest.raises(ZeroDivisionError):
		a / Complex(0)
	with pytest.raises(TypeError):
		a + 'x'

def test_complex_misc():
	assert Complex(3, 4).normal == 5.0
	assert Complex(3, 4).length() == 5.0
	assert complex(Complex(1, 2)) == 1 + 2j
	assert hash(Complex(2)) == hash(2)
	assert str(Complex(1, -2)) == '1-2i'
	assert str(Complex(1.5, 2)) == '1.5+2i'
	assert str(Imaginary(0, 1)) == '0+1i'

def test_imaginary():
	z = Imaginary(1, 2) + 1
	assert isinstance(z, Imaginary)
	assert z == Complex(2, 2)
	assert Imaginary.I * Imaginary.I == -1


# COORDINATES
# -----------

def test_point():
	p = Point3(1, 2, 2)
	assert p.distance_from(Point3(0, 0, 0)) == 3.0
	assert Point3.distance(Point3(0, 0, 0), p) == 3.0
	assert p.to_vector() == Vector3(1, 2, 2)
	assert Point3.from_vector(Vector3(1, 2, 2)) == p
	assert Point3.from_sequence([1, 2, 2]) == p
	assert str(p) == 'Rect(1, 2, 2)'
	with pytest.raises(ValueError):
		Point3.from_sequence([1, 2])

def test_vector_arithmetic():
	v = Vector3(1, 2, 3)
	assert v + Vector3(1, 1, 1) == Vector3(2, 3, 4)
	assert v - v == Vector3.ZERO
	assert 2 * v == Vector3(2, 4, 6) and v * 2 == Vector3(2, 4, 6)
	assert -v == Vector3(-1, -2, -3)
	assert v.dot(Vector3(1, 1, 1)) == 6
	assert Vector3.I.cross(Vector3.J) == Vector3.K
	assert Vector3(1, 2, 2).length == 3.0
	assert v.end_point == Point3(1, 2, 3)
	assert Vector3.from_point(Point3(1, 2, 3)) == v
	assert str(v) == '<1, 2, 3>'
	with pytest.raises(TypeError):
		v * v

def test_coordinates_accept_real():
	assert Point3(Real(1), 0, 0) == Point3(1, 0, 0)
	assert Vector3(1, 2, 3) * Real(2) == Vector3(2, 4, 6)
	assert Real(2) * Vector3(1, 2, 3) == Vector3(2, 4, 6)
	assert Cylindrical3(Real(1), 0, Real(2)).z == 2.0
	with pytest.raises(TypeError):
		Point3('1', 0, 0)
	with pytest.raises(TypeError):
		Vector3(1, 2, 3) * Complex(2)

def test_general_vector():
	v = Vector.of(1, 2, 3)
	assert v.dimension == 3 and not v.row
	assert list(v) == [1.0, 2.0, 3.0] and v[1] == 2.0 and len(v) == 3
	assert v + Vector([1, 1, 1]) == Vector.of(2, 3, 4)
	assert v - v == Vector.zeros(3)
	assert -v == v.negate() == Vector.of(-1, -2, -3)
	assert v.invert() == Vector.of(1, 2, 3, row=True)
	assert v.invert().invert() == v
	assert 2 * v == v * Real(2) == Vector.of(2, 4, 6)
	assert str(v) == '[1 2 3]ᵀ'
	assert str(v.invert()) == '[1 2 3]'
	assert Vector.of(Real(1), 2.5).data == (1.0, 2.5)

def test_general_vector_errors():
	with pytest.raises(ValueError):
		Vector.of(1, 2) + Vector.of(1, 2, 3)
	with pytest.raises(ValueError):
		Vector.of(1, 2) + Vector.of(1, 2, row=True)
	with pytest.raises(ValueError):
		Vector.of(1, 2) - Vector.of(1, 2).invert()
	with pytest.raises(ValueError):
		Vector.zeros(0)
	with pytest.raises(ValueError):
		Vector(())
	with pytest.raises(TypeError):
		Vector.of(1, 'x')
	with pytest.raises(TypeError):
		Vector.of(1, 2) + Vector3(1, 2, 3)

def test_vector_angle():
	assert Vector3.I.angle_between(Vector3.J) == pytest.approx(math.pi / 2)
	assert Vector3.angle_between(Vector3.I, Vector3(2, 0, 0)) == 0.0
	assert Vector3.I.angle_between(-Vector3.I) == pytest.approx(math.pi)
	with pytest.raises(ZeroDivisionError):
		Vector3.ZERO.angle_between(Vector3.I)

def test_cylindrical():
	c = Point3(0, 2, 5).to_cylindrical()
	assert c.r == 2.0
	assert c.theta == pytest.approx(math.pi / 2)
	assert c.z == 5.0
	p = c.to_point()
	assert (p.x, p.y, p.z) == pytest.approx((0, 2, 5))
	assert Cylindrical3.from_point(Point3(1, 0, 0)) == Cylindrical3(1, 0, 0)
	assert str(Cylindrical3(1, 0, 2)) == 'Cyl(1, 0, 2)'
