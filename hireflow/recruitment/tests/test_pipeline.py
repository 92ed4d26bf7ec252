from itertools import product

from django.test import SimpleTestCase

from hireflow.recruitment.constants import ApplicationStatus, ClientDecision
from hireflow.recruitment.utils.pipeline import (
    DECISION_STATUS_MAPPER,
    FUNNEL_ORDER,
    explain_blocked_transition,
    funnel_order,
    is_terminal,
    is_transition_allowed,
    map_decision_to_status,
)

NEW, CONTACTED, QUALIFIED, PLACED, REJECTED = (
    ApplicationStatus.NEW,
    ApplicationStatus.CONTACTED,
    ApplicationStatus.QUALIFIED,
    ApplicationStatus.PLACED,
    ApplicationStatus.REJECTED,
)
LANE = (NEW, CONTACTED, QUALIFIED, PLACED)


class TestPipelineStatusModel(SimpleTestCase):

    def test_every_status_and_decision_is_ranked(self):
        self.assertSetEqual(set(FUNNEL_ORDER), set(ApplicationStatus))
        self.assertSetEqual(set(DECISION_STATUS_MAPPER), set(ClientDecision))

    def test_funnel_order(self):
        self.assertListEqual(
            [funnel_order(status) for status in LANE],
            [0, 1, 2, 3]
        )
        self.assertEqual(funnel_order('REJECTED'), -1)

    def test_terminal_statuses(self):
        self.assertTrue(is_terminal(PLACED))
        self.assertTrue(is_terminal('REJECTED'))
        for status in (NEW, CONTACTED, QUALIFIED):
            self.assertFalse(is_terminal(status))

    def test_nothing_leaves_a_terminal_status(self):
        for current, target in product((PLACED, REJECTED), ApplicationStatus):
            with self.subTest(current=current, target=target):
                self.assertFalse(is_transition_allowed(current, target))

    def test_rejection_allowed_from_every_open_status(self):
        for current in (NEW, CONTACTED, QUALIFIED):
            with self.subTest(current=current):
                self.assertTrue(is_transition_allowed(current, REJECTED))

    def test_lane_moves_only_forward(self):
        for current, target in product(LANE, LANE):
            if current == PLACED:
                continue
            with self.subTest(current=current, target=target):
                self.assertEqual(
                    is_transition_allowed(current, target),
                    FUNNEL_ORDER[target] > FUNNEL_ORDER[current]
                )

    def test_plain_strings_are_accepted(self):
        self.assertTrue(is_transition_allowed('NEW', 'QUALIFIED'))
        with self.assertRaises(ValueError):
            is_transition_allowed('NEW', 'HIRED')

    def test_blocked_transition_reasons(self):
        for current, target, reason in (
            (PLACED, REJECTED, 'terminal: placed'),
            (REJECTED, QUALIFIED, 'terminal: rejected'),
            (QUALIFIED, QUALIFIED, 'regression/no-op'),
            (QUALIFIED, CONTACTED, 'regression/no-op'),
            (NEW, QUALIFIED, ''),
            (CONTACTED, REJECTED, ''),
        ):
            with self.subTest(current=current, target=target):
                self.assertEqual(explain_blocked_transition(current, target), reason)

    def test_decision_mapping(self):
        self.assertEqual(map_decision_to_status('APPROVED'), QUALIFIED)
        self.assertEqual(map_decision_to_status(ClientDecision.REJECTED), REJECTED)
        self.assertIsNone(map_decision_to_status(ClientDecision.PENDING))
