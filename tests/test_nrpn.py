from hypothesis import given
from hypothesis import strategies as st

from midikit import nrpn

channels = st.integers(min_value=0, max_value=15)
values = st.integers(min_value=0, max_value=127)


@given(channel=channels)
def test_reset(channel):
    assert nrpn.reset(channel) == [
        bytes((0xB0 | channel, 99, 127)),
        bytes((0xB0 | channel, 98, 127)),
    ]


@given(channel=channels, v99=values, v98=values, msb=values, lsb=values)
def test_nrpn_sequence(channel, v99, v98, msb, lsb):
    msgs = nrpn.nrpn(channel, v99, v98, msb, lsb)
    assert all(m[0] == 0xB0 | channel for m in msgs)
    assert [m[1] for m in msgs] == [99, 98, 6, 38, 99, 98]
    assert [m[2] for m in msgs[:4]] == [v99, v98, msb, lsb]
    assert msgs[4:] == nrpn.reset(channel)


@given(channel=channels, v99=values, v98=values)
def test_increment(channel, v99, v98):
    msgs = nrpn.increment(channel, v99, v98)
    assert msgs[:3] == [
        bytes((0xB0 | channel, 99, v99)),
        bytes((0xB0 | channel, 98, v98)),
        bytes((0xB0 | channel, 96, 0)),
    ]
    assert msgs[3:] == nrpn.reset(channel)


@given(channel=channels, v99=values, v98=values)
def test_decrement(channel, v99, v98):
    msgs = nrpn.decrement(channel, v99, v98)
    assert msgs[2] == bytes((0xB0 | channel, 97, 0))
    assert msgs[3:] == nrpn.reset(channel)
    assert len(msgs) == 5