# tests/test_mutations.py
import unittest

from termhost import (
    InstanceRemovedError,
    UsageError,
    append_child,
    apply_attributes,
    clear_all,
    create_instance,
    insert_before,
    remove_child,
    subscription_count,
    teardown,
)

from helpers import recorder


def ids(parent):
    return [child.id for child in parent.get_children()]


class TestAppendAndInsert(unittest.TestCase):
    def setUp(self):
        self.parent = create_instance("group", {"id": "parent"})
        self.a = create_instance("text", {"id": "a"})
        self.b = create_instance("text", {"id": "b"})
        self.c = create_instance("text", {"id": "c"})

    def test_append_keeps_call_order(self):
        for child in (self.a, self.b, self.c):
            append_child(self.parent, child)
        self.assertEqual(ids(self.parent), ["a", "b", "c"])
        self.assertIs(self.b.parent, self.parent)

    def test_insert_before(self):
        append_child(self.parent, self.a)
        append_child(self.parent, self.c)
        insert_before(self.parent, self.b, self.c)
        self.assertEqual(ids(self.parent), ["a", "b", "c"])
        insert_before(self.parent, self.c, self.a)
        self.assertEqual(ids(self.parent), ["c", "a", "b"])

    def test_insert_before_missing_sibling_appends(self):
        stranger = create_instance("text", {"id": "stranger"})
        append_child(self.parent, self.a)
        with self.assertLogs("termhost.mutations", level="DEBUG") as logs:
            insert_before(self.parent, self.b, stranger)
        self.assertEqual(ids(self.parent), ["a", "b"])
        self.assertTrue(any("appending" in line for line in logs.output))

    def test_insert_before_itself(self):
        insert_before(self.parent, self.a, self.a)
        self.assertEqual(ids(self.parent), ["a"])
        append_child(self.parent, self.b)
        insert_before(self.parent, self.a, self.a)
        self.assertEqual(ids(self.parent), ["a", "b"])

    def test_reappending_a_child_moves_it(self):
        for child in (self.a, self.b, self.c):
            append_child(self.parent, child)
        append_child(self.parent, self.a)
        self.assertEqual(ids(self.parent), ["b", "c", "a"])

    def test_order_matches_a_virtual_order_built_right_to_left(self):
        target = [create_instance("text", {"id": f"n{i}"}) for i in range(6)]
        following = None
        for node in reversed(target):
            if following is None:
                append_child(self.parent, node)
            else:
                insert_before(self.parent, node, following)
            following = node
        self.assertEqual(ids(self.parent), [f"n{i}" for i in range(6)])

    def test_child_of_another_parent_is_rejected(self):
        other = create_instance("group", {})
        append_child(other, self.a)
        with self.assertRaises(UsageError):
            append_child(self.parent, self.a)

    def test_leaves_cannot_hold_children(self):
        with self.assertRaises(UsageError):
            append_child(self.a, self.b)
        field = create_instance("input", {})
        with self.assertRaises(UsageError):
            append_child(field, self.b)


class TestRemove(unittest.TestCase):
    def setUp(self):
        self.parent = create_instance("group", {"id": "parent"})
        self.box = create_instance("box", {"id": "box"})
        self.handler, self.calls = recorder()
        self.field = create_instance("input", {"id": "field", "onInput": self.handler,
                                               "onEnter": self.handler})
        append_child(self.parent, self.box)
        append_child(self.box, self.field)

    def test_remove_detaches_and_tears_down_the_subtree(self):
        remove_child(self.parent, self.box)
        self.assertEqual(self.parent.get_children(), [])
        self.assertIsNone(self.box.parent)
        self.assertTrue(self.box.is_destroyed)
        self.assertTrue(self.field.is_destroyed)
        self.assertEqual(subscription_count(self.field), 0)

    def test_remove_twice_is_an_error(self):
        remove_child(self.parent, self.box)
        with self.assertRaises(InstanceRemovedError):
            remove_child(self.parent, self.box)

    def test_removed_instance_cannot_be_reused(self):
        remove_child(self.parent, self.box)
        with self.assertRaises(InstanceRemovedError):
            append_child(self.parent, self.box)
        with self.assertRaises(InstanceRemovedError):
            insert_before(self.parent, self.box, None)
        with self.assertRaises(InstanceRemovedError):
            apply_attributes(self.box, {"width": 3})
        with self.assertRaises(InstanceRemovedError):
            self.field.type_text("a")
        self.assertEqual(self.calls, [])

    def test_inserting_before_a_removed_sibling_is_an_error(self):
        loose = create_instance("text", {"id": "loose"})
        remove_child(self.parent, self.box)
        with self.assertRaises(InstanceRemovedError):
            insert_before(self.parent, loose, self.box)
        self.assertEqual(self.parent.get_children(), [])
        self.assertIsNone(loose.parent)

    def test_inserting_a_removed_child_before_itself_is_an_error(self):
        remove_child(self.parent, self.box)
        with self.assertRaises(InstanceRemovedError):
            insert_before(self.parent, self.box, self.box)

    def test_removing_a_non_child_is_an_error(self):
        stranger = create_instance("text", {})
        with self.assertRaises(InstanceRemovedError):
            remove_child(self.parent, stranger)
        self.assertFalse(stranger.is_destroyed)

    def test_teardown_happens_once(self):
        loose = create_instance("text", {})
        teardown(loose)
        with self.assertRaises(InstanceRemovedError):
            teardown(loose)

    def test_clear_all(self):
        extra = create_instance("text", {})
        append_child(self.parent, extra)
        clear_all(self.parent)
        self.assertEqual(self.parent.get_children(), [])
        self.assertTrue(extra.is_destroyed)
        self.assertTrue(self.field.is_destroyed)
        self.assertFalse(self.parent.is_destroyed)


if __name__ == "__main__":
    unittest.main()
