"""
Tests for AppRuntime start-up and shutdown against the fake server.
"""

import gc
import os
import unittest
from unittest import mock

from ocgui.config import Config
from ocgui.delegate import AppDelegate, DelegateDescriptor, DelegateSynthesizer
from ocgui.errors import AlreadyBuiltError, BridgeCallError, SynthesisError
from ocgui.runtime import SAFE_TO_CLOSE_TITLE, AppHandle, AppRuntime, RuntimeState
from ocgui.toolkit import use
from ocgui.widgets import Button, Label, VBox

from tests.fakes import GenericDialog, ToolkitTestCase, make_toolkit


def click_last_child(app, root):
    button = list(root.children.values())[-1]
    button.onclick.fire(button)


class Closer(AppDelegate):
    def __init__(self):
        super().__init__()
        self.status = Label("Running")
        self.quit_button = Button("Quit")
        self.handles = []

    def main(self, app):
        self.handles.append(app)
        self.quit_button.on_click(lambda button: app.close())
        return VBox([self.status, self.quit_button])


class TestAppRuntime(ToolkitTestCase):

    def setUp(self):
        super().setUp()
        patcher = mock.patch("ocgui.runtime.setup_logging")
        self.setup_logging = patcher.start()
        self.addCleanup(patcher.stop)

    def install(self, script=None):
        self.toolkit = make_toolkit(script)
        use(self.toolkit)
        return self.toolkit

    def runtime(self, delegate, **config):
        return AppRuntime(delegate, config=Config.from_dict(config), toolkit=self.toolkit)

    def test_quit_button_closes_the_app(self):
        self.install(click_last_child)
        delegate = Closer()
        runtime = self.runtime(delegate, port=9000)
        runtime.start()

        server = runtime.server
        self.assertTrue(server.started)
        self.assertTrue(server.stopped)
        self.assertTrue(server.app.closed)
        self.assertIs(runtime.state, RuntimeState.CLOSED)

        notice = server.app.root
        self.assertIsInstance(notice, GenericDialog)
        self.assertEqual(notice.title, SAFE_TO_CLOSE_TITLE)
        self.assertIn("disabled", notice.conf.attributes)
        self.assertIn("disabled", notice.cancel.attributes)

        handle = delegate.handles[0]
        self.assertIsInstance(handle, AppHandle)
        self.assertIs(handle.foreign_value, server.app)
        self.assertIs(runtime.session, handle)
        self.setup_logging.assert_called_once_with(runtime.config)

    def test_welcome_page_quit_button(self):
        def script(app, root):
            gc.collect()
            click_last_child(app, root)

        self.install(script)
        runtime = self.runtime(AppDelegate())
        runtime.start()
        self.assertTrue(runtime.server.app.closed)
        self.assertIs(runtime.state, RuntimeState.CLOSED)

    def test_button_built_inside_main(self):
        class LocalQuit(AppDelegate):
            def main(self, app):
                quit_button = Button("Quit")
                quit_button.on_click(lambda button: app.close())
                return VBox([Label("Running"), quit_button])

        def script(app, root):
            gc.collect()
            click_last_child(app, root)

        self.install(script)
        runtime = self.runtime(LocalQuit())
        runtime.start()
        self.assertTrue(runtime.server.stopped)
        self.assertTrue(runtime.server.app.closed)
        self.assertIs(runtime.state, RuntimeState.CLOSED)

    def test_server_options(self):
        self.install()
        runtime = self.runtime(Closer(), title="Demo", port=9000, address="0.0.0.0",
                               multiple_instance=True, update_interval=0.5)
        runtime.start()
        options = runtime.server.options
        self.assertEqual(options["title"], "Demo")
        self.assertEqual(options["address"], "0.0.0.0")
        self.assertEqual(options["port"], 9000)
        self.assertTrue(options["multiple_instance"])
        self.assertEqual(options["update_interval"], 0.5)
        self.assertTrue(options["start_browser"])

    def test_static_resources(self):
        self.install()
        runtime = self.runtime(Closer(), res_dir="assets")
        self.assertEqual(runtime.res_path, os.path.join(os.getcwd(), "assets"))
        absolute = os.path.abspath(os.path.join(os.sep, "srv", "assets"))
        self.assertEqual(self.runtime(Closer(), res_dir=absolute).res_path, absolute)

        runtime.start()
        self.assertEqual(runtime.server.app.app_args["static_file_path"], {"res": runtime.res_path})

    def test_close_from_a_handler_via_runtime(self):
        delegate = Closer()
        runtime = None

        def close_runtime(app, root):
            runtime.close()

        self.install(close_runtime)
        runtime = self.runtime(delegate)
        runtime.start()
        self.assertTrue(runtime.server.app.closed)
        self.assertIs(runtime.state, RuntimeState.CLOSED)
        # Closing again does nothing.
        runtime.close()

    def test_starts_once(self):
        self.install()
        runtime = self.runtime(Closer())
        runtime.start()
        with self.assertRaises(AlreadyBuiltError):
            runtime.start()

    def test_empty_descriptor(self):
        self.install()
        runtime = self.runtime(Closer())
        with mock.patch.object(DelegateSynthesizer, "build", return_value=DelegateDescriptor("Closer")):
            with self.assertRaises(SynthesisError):
                runtime.start()
        self.assertIsNone(runtime.server)
        self.assertIs(runtime.state, RuntimeState.NEW)

    def test_failing_main_is_reported(self):
        class Broken(AppDelegate):
            def main(self, app):
                raise RuntimeError("no layout")

        self.install()
        runtime = self.runtime(Broken())
        with self.assertLogs("ocgui.bridge", level="ERROR"):
            with self.assertRaises(BridgeCallError):
                runtime.start()

    def test_standalone_window(self):
        self.install()
        runtime = self.runtime(Closer(), standalone=True, title="Desk", win_width=800, win_height=600)
        with mock.patch("ocgui.window.open_window", return_value=0) as open_window:
            runtime.start()
        server = runtime.server
        open_window.assert_called_once_with(server.address, title="Desk", width=800, height=600)
        self.assertFalse(server.options["start_browser"])
        self.assertIsNone(server.app)
        self.assertTrue(server.stopped)
        self.assertIs(runtime.state, RuntimeState.CLOSED)

    def test_delegate_start(self):
        toolkit = self.install(click_last_child)
        delegate = Closer()
        with mock.patch("ocgui.runtime.AppRuntime.start", autospec=True) as start:
            delegate.start(config=Config.from_dict({}), toolkit=toolkit)
        runtime = start.call_args[0][0]
        self.assertIs(runtime.delegate, delegate)
        self.assertIs(runtime.toolkit, toolkit)


if __name__ == "__main__":
    unittest.main()
