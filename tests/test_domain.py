"""Tests for domain models."""

from app.domain.action import Action
from app.domain.state import TaskState
from app.domain.task import Task, Vote


class TestTask:
    """Tests for Task and Vote."""

    def test_default_task_is_not_set(self):
        task = Task()
        assert task.name == ""
        assert not task.is_set
        assert task.votes == []

    def test_votes_keep_arrival_order_and_duplicates(self):
        task = Task(name="T1")
        task.add_vote("alice", 3.0)
        task.add_vote("bob", 1.0)
        task.add_vote("alice", 5.0)

        assert [v.username for v in task.votes] == ["alice", "bob", "alice"]
        assert task.voters == "@alice, @bob, @alice"

    def test_reset_votes_keeps_name(self):
        task = Task(name="T1", votes=[Vote("alice", 2.0)])
        task.reset_votes()
        assert task.name == "T1"
        assert task.votes == []

    def test_to_dict(self):
        task = Task(name="T1", votes=[Vote("alice", 2.5)])
        assert task.to_dict() == {
            "name": "T1",
            "votes": [{"username": "alice", "value": 2.5}],
        }


class TestAction:
    """Tests for action parsing."""

    def test_known_actions(self):
        assert Action.parse("task") is Action.TASK
        assert Action.parse("vote") is Action.VOTE
        assert Action.parse("results") is Action.RESULTS

    def test_parse_is_case_sensitive(self):
        assert Action.parse("Task") is None
        assert Action.parse("VOTE") is None

    def test_unknown_action(self):
        assert Action.parse("help") is None
        assert Action.parse("") is None


class TestTaskState:
    """Tests for the task slot."""

    def test_starts_empty(self):
        state = TaskState()
        assert not state.task.is_set

    def test_replace_discards_votes(self):
        state = TaskState()
        state.replace("T1").add_vote("alice", 3.0)

        task = state.replace("T2")
        assert state.task is task
        assert task.name == "T2"
        assert task.votes == []

    def test_states_are_independent(self):
        first, second = TaskState(), TaskState()
        first.replace("T1")
        assert not second.task.is_set
