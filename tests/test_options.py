from pve_mcp.translate.options import is_enabled, parse_property_string, split_volume


def test_parses_key_value_tokens():
    options = parse_property_string("virtio=BC:24:11:2E:C8:9F,bridge=vmbr1,firewall=1")
    assert options == {"virtio": "BC:24:11:2E:C8:9F", "bridge": "vmbr1", "firewall": "1"}


def test_bare_tokens_need_a_default_key():
    raw = "local-lvm:vm-100-disk-0,iothread=1,size=32G"
    assert parse_property_string(raw) == {"iothread": "1", "size": "32G"}
    assert parse_property_string(raw, default_key="file")["file"] == "local-lvm:vm-100-disk-0"


def test_last_duplicate_wins_and_empty_tokens_are_skipped():
    assert parse_property_string("bridge=vmbr0,, bridge=vmbr2 ,") == {"bridge": "vmbr2"}


def test_value_may_contain_equals_sign():
    assert parse_property_string("args=-cpu host,+x=1") == {"args": "-cpu host", "+x": "1"}


def test_none_and_non_string_input():
    assert parse_property_string(None) == {}
    assert parse_property_string(1, default_key="enabled") == {"enabled": "1"}


def test_split_volume():
    assert split_volume("local-lvm:vm-100-disk-0") == ("local-lvm", "vm-100-disk-0")
    assert split_volume("none") is None
    assert split_volume(":vm-100-disk-0") is None
    assert split_volume(None) is None


def test_is_enabled():
    assert is_enabled("1") is True
    assert is_enabled("0") is False
    assert is_enabled("enabled=1,fstrim_cloned_disks=1") is True
    assert is_enabled("enabled=0") is False
    assert is_enabled(1) is True
    assert is_enabled(None) is False
