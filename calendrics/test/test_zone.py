import struct

from .. import core
from .. import types
from .. import tzif
from .. import zone
from .. import merge

# Spring and fall transitions of a synthetic zone alternating between +01:00 and +02:00.
spring = 100 * 86400
fall = 200 * 86400

def tzif_data(version=b'2'):
	"""
	# Construct TZif data describing the synthetic zone.
	"""
	transitions = (spring, fall)
	indexes = (1, 0)
	ttinfo = ((3600, 0, 0), (7200, 1, 4))
	abbr = b'CET\0CEST\0'

	def header():
		return tzif.magic + version + (b'\0' * 15) + tzif.header_struct.pack(
			2, 2, 0, len(transitions), len(ttinfo), len(abbr)
		)

	def block(transtime):
		return b''.join([
			b''.join(transtime.pack(t) for t in transitions),
			bytes(indexes),
			b''.join(tzif.ttinfo_struct.pack(*x) for x in ttinfo),
			abbr,
			bytes([0, 0]),
			bytes([0, 0]),
		])

	data = header() + block(tzif.transtime_struct_v1)
	if version != b'\0':
		data += header() + block(tzif.transtime_struct_v2) + b'\nCET-1CEST,M3.5.0,M10.5.0/3\n'
	return data

def synthetic(tmp_path, version=b'2', name='Synthetic/Central'):
	path = tmp_path / 'zone.tzif'
	path.write_bytes(tzif_data(version))
	return zone.ZoneId.from_file(name, str(path))

def test_tzif_parse(test):
	transtimes, typs, leaps, isstd, isgmt, timeinfo = tzif.parse(tzif_data())
	test/transtimes == (spring, fall)
	test/typs == (1, 0)
	test/leaps == ()
	test/timeinfo == ((b'CET', 3600, 0), (b'CEST', 7200, 1))

	test/tzif.parse(tzif_data(b'\0'))[0] == (spring, fall)
	test/tzif.parse(b'nope') == None

def test_tzif_version_two_times(test):
	# The second block's transition times are eight bytes wide.
	data = tzif_data()
	v1 = tzif.block_size(tzif.read_header(data)[0], tzif.transtime_struct_v1, tzif.leappairs_struct_v1)
	v2 = tzif.block_size(tzif.read_header(data)[0], tzif.transtime_struct_v2, tzif.leappairs_struct_v2)
	test/(v2 - v1) == 2 * 4

def test_tzif_structure(test, tmp_path):
	path = tmp_path / 'zone.tzif'
	path.write_bytes(tzif_data())
	typs, transitions, leaps = tzif.get_timezone_data(str(path))
	test/len(typs) == 2
	test/typs[1].tz_abbrev == b'CEST'
	test/typs[1].tz_isdst == True
	test/[t for t, info in transitions] == [spring, fall]
	test/transitions[0][1].tz_offset == 7200

	path.write_bytes(b'not a zone')
	test/tzif.get_timezone_data(str(path)) == None
	with test/ValueError:
		zone.TransitionRules.from_file(str(path))

def test_offset_at(test, tmp_path):
	rules = synthetic(tmp_path).rules
	test/rules.default == 3600
	test/rules.offset_at(spring - 1) == 3600
	test/rules.offset_at(spring) == 7200
	test/rules.offset_at(fall - 1) == 7200
	test/rules.offset_at(fall) == 3600
	test/rules.designation(spring) == 'CEST'
	test/rules.designation(fall) == 'CET'

def test_version_one(test, tmp_path):
	rules = synthetic(tmp_path, version=b'\0').rules
	test/rules.offset_at(spring) == 7200
	test/rules.offset_at(fall) == 3600

def test_gap(test, tmp_path):
	rules = synthetic(tmp_path).rules
	local = spring + 3600 + 60
	test/rules.valid_offsets(local) == ()
	test/rules.transition_after(local) == (spring, 7200)
	test/rules.valid_offsets(spring + 7200) == (7200,)

def test_overlap(test, tmp_path):
	rules = synthetic(tmp_path).rules
	local = fall + 3600 + 60
	# The earlier instant's offset is first.
	test/rules.valid_offsets(local) == (7200, 3600)
	test/rules.valid_offsets(fall + 7200) == (3600,)

def test_zoned_datetime(test, tmp_path):
	z = synthetic(tmp_path)
	zdt = types.ZonedDateTime.from_epoch_second(spring, z)
	test/zdt.offset == 7200
	test/str(zdt) == '1970-04-11T02:00:00+02:00[Synthetic/Central]'

	gap = types.LocalDateTime.from_local_epoch_second(spring + 3660)
	shifted = types.ZonedDateTime.of(gap, z)
	test/shifted.epoch_second == spring + 60
	test/shifted.datetime == types.LocalDateTime.from_local_epoch_second(spring + 7260)

	overlap = types.LocalDateTime.from_local_epoch_second(fall + 3660)
	test/types.ZonedDateTime.of(overlap, z).offset == 7200
	test/types.ZonedDateTime.of(overlap, z, preferred=types.ZoneOffset(3600)).offset == 3600

def test_merge_gap(test, tmp_path):
	z = synthetic(tmp_path)
	gap = types.LocalDateTime.from_local_epoch_second(spring + 3660)
	with test/core.RuleConflict:
		merge.merge([gap, z])

	m = merge.merge([gap, z], merge.lenient)
	test/m.zoned.epoch_second == spring + 60
	test/m.offset == 7200

def test_merge_overlap(test, tmp_path):
	z = synthetic(tmp_path)
	overlap = types.LocalDateTime.from_local_epoch_second(fall + 3660)
	m = merge.merge([overlap, z])
	test/m.offset == 7200
	test/m.zoned.epoch_second == fall - 3540

	later = merge.merge([overlap, types.ZoneOffset(3600), z])
	test/later.zoned.epoch_second == fall + 60

def test_merge_invalid_offset(test, tmp_path):
	z = synthetic(tmp_path)
	ldt = types.LocalDateTime.from_local_epoch_second(fall + 86400)
	odt = types.OffsetDateTime.combine(ldt, types.ZoneOffset(7200))
	with test/core.RuleConflict:
		merge.merge([odt, z])

	m = merge.merge([odt, z], merge.lenient)
	test/m.offset == 3600
	test/m.zoned.epoch_second == odt.epoch_second

def test_zone_id(test, tmp_path, monkeypatch):
	test/zone.ZoneId.of('UTC') % zone.ZoneId.utc
	test/zone.ZoneId.of('Z') % zone.ZoneId.utc
	test/zone.ZoneId.utc.rules.offset_at(0) == 0
	test/zone.ZoneId.utc.rules.transition_after(0) == None

	fixed = zone.ZoneId.of('+01:00')
	test/fixed == zone.ZoneId.fixed(3600)
	test/fixed.name == '+01:00'
	test/fixed.rules.valid_offsets(0) == (3600,)
	test/repr(fixed) == "(ZoneId@'+01:00')"

	(tmp_path / 'Synthetic').mkdir()
	(tmp_path / 'Synthetic' / 'Loaded').write_bytes(tzif_data())
	monkeypatch.setattr(tzif, 'tzdir', str(tmp_path))
	loaded = zone.ZoneId.of('Synthetic/Loaded')
	test/str(loaded) == 'Synthetic/Loaded'
	test/loaded.rules.offset_at(spring) == 7200
	test/zone.ZoneId.of('Synthetic/Loaded') % loaded

def test_zone_cache_directory(test, tmp_path, monkeypatch):
	first = tmp_path / 'first'
	second = tmp_path / 'second'
	(first / 'Synthetic').mkdir(parents=True)
	second.mkdir()
	(first / 'Synthetic' / 'Cached').write_bytes(tzif_data())

	test/tzif.system_timezone_file('Synthetic/Cached', str(first)) == str(first / 'Synthetic' / 'Cached')

	monkeypatch.setattr(tzif, 'tzdir', str(first))
	loaded = zone.ZoneId.of('Synthetic/Cached')
	test/zone.ZoneId.of('Synthetic/Cached') % loaded

	# Same name, different directory.
	monkeypatch.setattr(tzif, 'tzdir', str(second))
	with test/FileNotFoundError:
		zone.ZoneId.of('Synthetic/Cached')

def test_zone_id_equality(test, tmp_path):
	a = synthetic(tmp_path, name='Synthetic/A')
	b = synthetic(tmp_path, name='Synthetic/A')
	test/a == b
	test/hash(a) == hash(b)
	test/a != synthetic(tmp_path, name='Synthetic/B')

def test_local(test, monkeypatch):
	monkeypatch.setenv('TZ', 'UTC')
	test/zone.ZoneId.local() % zone.ZoneId.utc
	monkeypatch.setenv('TZ', ':+02:00')
	test/zone.ZoneId.local() == zone.ZoneId.fixed(7200)
