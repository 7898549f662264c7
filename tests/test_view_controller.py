"""
Тесты для машины состояний представлений
"""

import unittest
from unittest.mock import MagicMock

from app.rendering import PageRenderer
from app.services.view_controller import ViewController, ViewState
from tests.fake_chain import make_block, make_transaction


class TestViewController(unittest.TestCase):
    """Тесты переходов и взаимного исключения представлений"""

    def setUp(self):
        self.sink = MagicMock()
        self.views = ViewController(self.sink)
        self.block = make_block(10, 2)
        self.transaction = make_transaction(10, 0)

    def test_initial_state_is_main(self):
        self.assertIs(self.views.state, ViewState.MAIN)
        self.assertIsNone(self.views.payload)
        self.assertEqual(self.views.active_states(), [ViewState.MAIN])

    def test_transition_to_block_detail(self):
        """После перехода активно ровно одно представление: детали блока"""
        self.views.transition_to(ViewState.BLOCK_DETAIL, self.block)

        self.assertEqual(self.views.active_states(), [ViewState.BLOCK_DETAIL])
        self.assertFalse(self.views.is_active(ViewState.MAIN))
        self.assertFalse(self.views.is_active(ViewState.TRANSACTION_DETAIL))
        self.assertEqual(self.views.payload, self.block)
        self.sink.render_block_detail.assert_called_once_with(self.block)
        self.sink.show_view.assert_called_once_with("blockDetail")

    def test_return_to_main_discards_payload(self):
        self.views.transition_to(ViewState.BLOCK_DETAIL, self.block)

        self.views.return_to_main()

        self.assertEqual(self.views.active_states(), [ViewState.MAIN])
        self.assertIsNone(self.views.payload)
        self.sink.show_view.assert_called_with("mainView")

    def test_detail_to_detail(self):
        self.views.transition_to(ViewState.BLOCK_DETAIL, self.block)
        self.views.transition_to(ViewState.TRANSACTION_DETAIL, self.transaction)

        self.assertEqual(self.views.active_states(), [ViewState.TRANSACTION_DETAIL])
        self.assertEqual(self.views.payload, self.transaction)
        self.sink.render_transaction_detail.assert_called_once_with(self.transaction)

    def test_main_ignores_payload(self):
        self.views.transition_to(ViewState.MAIN, self.block)

        self.assertIsNone(self.views.payload)
        self.sink.render_block_detail.assert_not_called()

    def test_without_sink(self):
        views = ViewController()

        views.transition_to(ViewState.TRANSACTION_DETAIL, self.transaction)

        self.assertIs(views.state, ViewState.TRANSACTION_DETAIL)


class TestViewControllerWithPage(unittest.TestCase):
    """Тесты совместно с PageRenderer"""

    def test_page_shows_single_view(self):
        renderer = PageRenderer()
        views = ViewController(renderer)
        block = make_block(3, 1)

        views.transition_to(ViewState.BLOCK_DETAIL, block)

        self.assertEqual(renderer.state.active_view, "blockDetail")
        self.assertEqual(renderer.state.block_detail, block)

        views.return_to_main()

        self.assertEqual(renderer.state.active_view, "mainView")


if __name__ == "__main__":
    unittest.main()
