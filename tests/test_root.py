# tests/test_root.py
import unittest

from termhost import (
    Reconciler,
    RootAlreadyMountedError,
    RootLifecycleManager,
    RootState,
    Surface,
    UnknownElementTypeError,
    UsageError,
    create_element as h,
    create_root,
    subscription_count,
)

from helpers import recorder


def hello_tree():
    return h("box", {"id": "box"}, h("text", {"id": "greeting", "content": "hello"}))


class StateSpyReconciler(Reconciler):
    """Records the manager's state each time a commit starts."""

    def __init__(self):
        super().__init__()
        self.manager = None
        self.seen_states = []

    def update_container(self, element, container):
        self.seen_states.append(self.manager.state)
        super().update_container(element, container)


class FailingUnmountReconciler(Reconciler):
    """Commits normally but fails on the empty-tree commit."""

    def update_container(self, element, container):
        if element is None:
            raise RuntimeError("commit failed")
        super().update_container(element, container)


class TestRootLifecycle(unittest.TestCase):
    def setUp(self):
        self.manager = RootLifecycleManager()

    def tearDown(self):
        self.manager.unmount()

    def test_mount_unmount_and_mount_again(self):
        surface = Surface()
        handle = self.manager.mount(hello_tree(), surface)

        self.assertIs(handle.surface, surface)
        self.assertEqual(self.manager.state, RootState.MOUNTED)
        root_children = surface.root.get_children()
        self.assertEqual(len(root_children), 1)
        box_children = root_children[0].get_children()
        self.assertEqual(len(box_children), 1)
        self.assertEqual(box_children[0].content, "hello")

        self.manager.unmount()
        self.assertEqual(surface.root.get_children(), [])
        self.assertTrue(surface.is_destroyed)
        self.assertEqual(self.manager.state, RootState.UNMOUNTED)
        self.assertIsNone(self.manager.surface)
        self.assertIsNone(self.manager.container)

        second = Surface()
        self.manager.mount(hello_tree(), second)
        self.assertTrue(self.manager.is_mounted)
        self.assertEqual(len(second.root.get_children()), 1)

    def test_only_one_root_at_a_time(self):
        self.manager.mount(hello_tree(), Surface())
        other = Surface()
        with self.assertRaises(RootAlreadyMountedError):
            self.manager.mount(hello_tree(), other)
        self.assertEqual(other.root.get_children(), [])
        self.assertTrue(self.manager.is_mounted)

    def test_unmount_when_unmounted_is_a_no_op(self):
        self.manager.unmount()
        self.manager.unmount()
        self.assertEqual(self.manager.state, RootState.UNMOUNTED)

    def test_update_requires_a_mounted_root(self):
        with self.assertRaises(UsageError):
            self.manager.update(hello_tree())

    def test_update_commits_into_the_mounted_tree(self):
        surface = Surface()
        self.manager.mount(hello_tree(), surface)
        self.manager.update(h("box", {"id": "box"}, h("text", {"id": "greeting", "content": "bye"})))
        self.assertEqual(surface.root.get_children()[0].get_children()[0].content, "bye")

    def test_unmount_tears_down_every_instance(self):
        handler, calls = recorder()
        surface = Surface()
        self.manager.mount(h("group", {}, h("input", {"id": "name", "onInput": handler})), surface)
        field = surface.root.get_children()[0].get_children()[0]
        self.assertEqual(subscription_count(field), 1)

        self.manager.unmount()

        self.assertTrue(field.is_destroyed)
        self.assertEqual(subscription_count(field), 0)
        self.assertEqual(calls, [])

    def test_failed_initial_commit_leaves_the_root_unmounted(self):
        surface = Surface()
        with self.assertLogs("termhost.root", level="DEBUG"):
            with self.assertRaises(UnknownElementTypeError):
                self.manager.mount(h("blink", {}), surface)
        self.assertEqual(self.manager.state, RootState.UNMOUNTED)
        self.manager.mount(hello_tree(), surface)
        self.assertTrue(self.manager.is_mounted)

    def test_failed_initial_commit_is_not_logged_as_an_error(self):
        with self.assertNoLogs("termhost.root", level="ERROR"):
            with self.assertRaises(UnknownElementTypeError):
                self.manager.mount(h("blink", {}), Surface())

    def test_failed_unmount_commit_still_tears_down_the_tree(self):
        handler, calls = recorder()
        manager = RootLifecycleManager(reconciler=FailingUnmountReconciler())
        surface = Surface()
        manager.mount(h("group", {}, h("input", {"id": "name", "onInput": handler})), surface)
        group = surface.root.get_children()[0]
        field = group.get_children()[0]

        with self.assertRaises(RuntimeError):
            manager.unmount()

        self.assertEqual(manager.state, RootState.UNMOUNTED)
        self.assertTrue(surface.is_destroyed)
        self.assertTrue(group.is_destroyed)
        self.assertTrue(field.is_destroyed)
        self.assertEqual(subscription_count(field), 0)
        self.assertEqual(calls, [])

    def test_mounting_a_destroyed_surface_is_refused(self):
        surface = Surface()
        surface.destroy()
        with self.assertRaises(UsageError):
            self.manager.mount(hello_tree(), surface)
        self.assertEqual(self.manager.state, RootState.UNMOUNTED)

    def test_commits_run_in_transitional_states(self):
        spy = StateSpyReconciler()
        manager = RootLifecycleManager(reconciler=spy)
        spy.manager = manager
        manager.mount(hello_tree(), Surface())
        manager.update(hello_tree())
        manager.unmount()
        self.assertEqual(spy.seen_states, [RootState.MOUNTING, RootState.MOUNTED, RootState.UNMOUNTING])

    def test_create_root_returns_the_shared_manager(self):
        self.assertIs(create_root(), create_root())
        self.assertIs(create_root(), RootLifecycleManager.instance())


if __name__ == "__main__":
    unittest.main()
