# tcqdisc

`tcqdisc` turns Linux traffic control queueing discipline settings into the
bytes the kernel expects inside a netlink `TCA_OPTIONS` attribute, and turns
those bytes back into Python objects. All values are encoded in the host's
native byte order, as the kernel expects.

It covers:

- `tcqdisc.attributes`: the netlink attribute (type-length-value) format,
  with `Attribute`, `encode_attributes`, `decode_attributes` and
  `encode_*`/`decode_*` helpers for 8, 16, 32 and 64-bit integers;
- `tcqdisc.structs`: fixed-layout structures from `pkt_sched.h`
  (`Stats`, `Stats2`, `Tcft`, `RateSpec`, `Policy`, `FifoOpt` and the
  per-discipline extended statistics), with `marshal_struct`,
  `unmarshal_struct`, `marshal_and_align_struct`, and
  `marshal_fq_codel_xstats` / `unmarshal_fq_codel_xstats`;
- `tcqdisc.stats`: generic statistics (`GenStats`) from `gen_stats.h`;
- `tcqdisc.stab`: size tables (`Stab`, `SizeSpec`);
- the queueing disciplines hhf, htb, mqprio, netem, pie, plug, prio, qfq,
  red, sfb, sfq and taprio, one module each.

## Installation

```
pip install tcqdisc
```

## Usage

Each discipline has a dataclass plus a `marshal_*` and an `unmarshal_*`
function. Fields left as `None` are not sent.

```python
from tcqdisc.pie import Pie, marshal_pie, unmarshal_pie

payload = marshal_pie(Pie(target=20000, limit=100, tupdate=30000, ecn=1))
assert unmarshal_pie(payload) == Pie(target=20000, limit=100, tupdate=30000, ecn=1)
```

Disciplines whose options are a fixed structure follow the same pattern:

```python
from tcqdisc.prio import Prio, marshal_prio, unmarshal_prio

prio = Prio(bands=3, prio_map=[1, 2, 2, 2, 1, 2, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1])
assert unmarshal_prio(marshal_prio(prio)) == prio
```

netem and mqprio options start with a structure that is followed by
attributes; their `marshal_netem` / `marshal_mq_prio` functions produce both
parts and the matching `unmarshal_*` functions read both back.

The raw attribute layer can be used on its own:

```python
from tcqdisc.attributes import Attribute, encode_attributes, decode_attributes, encode_uint32

data = encode_attributes([Attribute(1, encode_uint32(42))])
print(decode_attributes(data))  # [Attribute(type=1, data=b'*\x00\x00\x00')]
```

## Errors

Errors are raised as exceptions derived from `tcqdisc.errors.TcError`:

- `NoArgError` when a required argument is missing, such as passing `None`
  to a marshal function, or an `MqPrio` without `opt`;
- `InvalidArgError` for values the format cannot represent, malformed
  attribute streams and unknown attribute types;
- `NotImplementedTcError` for operations the kernel does not support, such
  as decoding plug options.

Decoding a structure from too few bytes raises `EOFError`.

## What it does not do

`tcqdisc` does not open netlink sockets, send requests or monitor the
kernel; it only builds and parses option payloads. Pair it with whatever
netlink transport you already use. It does not compute rate tables: the htb
`ctab` and `rtab` fields are decoded when present but never encoded.

## Running the tests

```
pip install -e ".[test]"
pytest
```