import pytest

from burbir.friend_groups import FriendGroups


def test_each_id_starts_alone():
    groups = FriendGroups(5)
    assert [groups.find(i) for i in range(5)] == [0, 1, 2, 3, 4]


def test_union_uses_second_representative():
    groups = FriendGroups(5)
    groups.union(1, 2)
    assert groups.find(1) == 2
    assert groups.find(2) == 2


def test_union_is_transitive():
    groups = FriendGroups(6)
    groups.union(0, 1)
    groups.union(2, 3)
    groups.union(1, 3)
    rep = groups.find(0)
    assert all(groups.find(i) == rep for i in (1, 2, 3))
    assert groups.find(4) == 4
    assert groups.find(5) == 5


def test_union_same_group_keeps_group():
    groups = FriendGroups(4)
    groups.union(0, 1)
    groups.union(0, 1)
    assert groups.find(0) == groups.find(1)
    assert groups.find(1) == 1


def test_out_of_range():
    groups = FriendGroups(3)
    with pytest.raises(IndexError):
        groups.find(3)
    with pytest.raises(IndexError):
        groups.union(0, -1)


def test_bad_capacity():
    with pytest.raises(ValueError):
        FriendGroups(0)