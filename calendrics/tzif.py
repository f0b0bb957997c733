"""
# Read TZif, time zone information, files (zic output).

# Only the data blocks are read; the POSIX TZ string footer of version 2+ files is
# ignored, so instants after the last transition use the last transition's type.

# [ Elements ]
# /tzdir/
	# The directory containing the system's TZif files. Defaults to
	# `/usr/share/zoneinfo` and is overridden by the `TZDIR` environment variable.
# /tzdefault/
	# The file describing the system's local zone.
# /tzenviron/
	# The environment variable naming the local zone relative to &tzdir.
"""
import os
import os.path
import struct
import logging
import collections

log = logging.getLogger(__name__)

magic = b'TZif'
tzdir = os.environ.get('TZDIR') or '/usr/share/zoneinfo'
tzdefault = '/etc/localtime'
tzenviron = 'TZ'

header_fields = (
	'tzh_ttisgmtcnt',  # The number of UTC/local indicators stored in the file.
	'tzh_ttisstdcnt',  # The number of standard/wall indicators stored in the file.
	'tzh_leapcnt',     # The number of leap seconds for which data is stored in the file.
	'tzh_timecnt',     # The number of transition times for which data is stored in the file.
	'tzh_typecnt',     # The number of local time types for which data is stored in the file.
	'tzh_charcnt',     # The number of characters of time zone abbreviation strings.
)
tzinfo_header = collections.namedtuple('tzinfo_header', header_fields)

# Counts are four bytes in every version; following the magic, version, and reserved bytes.
header_struct = struct.Struct("!" + (len(header_fields) * "l"))
header_offset = 20

tzinfo_ttinfo = collections.namedtuple('tzinfo_ttinfo', ('tt_gmtoff', 'tt_isdst', 'tt_abbrind'))
ttinfo_struct = struct.Struct("!lBB")

transtime_struct_v1 = struct.Struct("!l")
leappairs_struct_v1 = struct.Struct("!ll")

transtime_struct_v2 = struct.Struct("!q")
leappairs_struct_v2 = struct.Struct("!ql")

def block_size(header, transtime, leappairs):
	"""
	# The number of bytes occupied by the data block described by &header.
	"""
	return (
		(header.tzh_timecnt * transtime.size) +
		header.tzh_timecnt +
		(header.tzh_typecnt * ttinfo_struct.size) +
		header.tzh_charcnt +
		(header.tzh_leapcnt * leappairs.size) +
		header.tzh_ttisstdcnt +
		header.tzh_ttisgmtcnt
	)

def read_header(data):
	end = header_offset + header_struct.size
	return tzinfo_header(*header_struct.unpack(data[header_offset:end])), data[end:]

def parse_block(header, y, transtime, leappairs):
	"""
	# Parse a data block using the given transition time and leap second structures.

	# [ Returns ]
	# `(transtimes, types, leaps, isstd, isgmt, timeinfo)`; see tzfile(5).
	"""
	end = header.tzh_timecnt * transtime.size
	transtimes = tuple([
		x[0] for x in transtime.iter_unpack(bytes(y[:end]))
	])
	y = y[end:]

	# unsigned char's
	types = tuple(bytes(y[:header.tzh_timecnt]))
	y = y[header.tzh_timecnt:]

	end = ttinfo_struct.size * header.tzh_typecnt
	timetypinfo = [
		tzinfo_ttinfo(*x) for x in ttinfo_struct.iter_unpack(bytes(y[:end]))
	]
	y = y[end:]

	abbr = bytes(y[:header.tzh_charcnt])
	y = y[header.tzh_charcnt:]

	end = leappairs.size * header.tzh_leapcnt
	leaps = tuple(leappairs.iter_unpack(bytes(y[:end])))
	y = y[end:]

	isstd = tuple(bytes(y[:header.tzh_ttisstdcnt]))
	y = y[header.tzh_ttisstdcnt:]

	isgmt = tuple(bytes(y[:header.tzh_ttisgmtcnt]))

	# Append a NUL terminator to guarantee that abbr.find() will not return -1.
	abbr += b'\0'
	timeinfo = tuple([
		(abbr[x.tt_abbrind:abbr.find(b'\0', x.tt_abbrind)], x.tt_gmtoff, x.tt_isdst)
		for x in timetypinfo
	])

	return (transtimes, types, leaps, isstd, isgmt, timeinfo)

def parse(data):
	"""
	# Given TZif data, identify the appropriate version and unpack the zone information.

	# [ Returns ]
	# The tuple produced by &parse_block or &None if &data is not TZif.
	"""
	if data[:4] != magic:
		return None

	version = bytes(data[4:5])
	header, y = read_header(data)
	if version in (b'\0', b''):
		return parse_block(header, y, transtime_struct_v1, leappairs_struct_v1)

	# Skip the version 1 block; the second header introduces 64-bit data.
	y = y[block_size(header, transtime_struct_v1, leappairs_struct_v1):]
	if y[:4] != magic:
		return None
	header, y = read_header(y)
	return parse_block(header, y, transtime_struct_v2, leappairs_struct_v2)

tzinfo = collections.namedtuple('tzinfo', (
	'tz_abbrev',
	'tz_offset',
	'tz_isdst',
	'tz_isstd',
	'tz_isgmt',
))

def structure(tzif):
	"""
	# Given the parse fields from &parse, make a more accessible structure:
	# `(types, transitions, leaps)` where transitions is an ordered list of
	# `(epoch_second, tzinfo)` pairs.
	"""
	(transtimes, types, leaps, isstd, isgmt, timeinfo) = tzif
	ltt = []
	for i, x in enumerate(timeinfo):
		ltt.append(tzinfo(
			tz_abbrev = x[0],
			tz_offset = x[1],
			tz_isdst = bool(x[2]),
			tz_isstd = bool(isstd[i]) if i < len(isstd) else False,
			tz_isgmt = bool(isgmt[i]) if i < len(isgmt) else False,
		))

	r = list(zip(transtimes, map(ltt.__getitem__, types)))
	r.sort(key = lambda x: x[0])
	return tuple(ltt), r, leaps

def system_timezone_file(relativepath, directory = None, _join = os.path.join):
	"""
	# The path of the TZif file &relativepath in &directory; defaults to &tzdir.
	"""
	return _join(directory or tzdir, relativepath)

def get_timezone_data(filepath):
	"""
	# Get the structured zone data out of the specified file; &None if the file
	# is not a TZif file.
	"""
	with open(filepath, 'rb') as f:
		d = parse(memoryview(f.read()))

	if d is None:
		log.debug("not a TZif file: %s", filepath)
		return None

	log.debug("read %d transitions and %d types from %s", len(d[0]), len(d[5]), filepath)
	return structure(d)
