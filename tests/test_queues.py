import pytest

from algodrills.queues import (
    CommandQueue,
    josephus,
    last_card,
    printer_queue,
    run_commands,
    zero_sum,
)


def test_empty_queue_answers():
    queue = CommandQueue()
    assert queue.pop() == -1
    assert queue.front() == -1
    assert queue.back() == -1
    assert queue.size() == 0
    assert queue.empty() is True


def test_queue_methods_fifo():
    queue = CommandQueue()
    queue.push(10)
    queue.push(20)
    assert queue.front() == 10
    assert queue.back() == 20
    assert queue.size() == 2
    assert len(queue) == 2
    assert queue.pop() == 10
    assert queue.pop() == 20
    assert queue.empty() is True


def test_execute_commands():
    queue = CommandQueue()
    assert queue.execute("push 1") is None
    assert queue.execute("push 2") is None
    assert queue.execute("front") == 1
    assert queue.execute("back") == 2
    assert queue.execute("size") == 2
    assert queue.execute("empty") == 0
    assert queue.execute("pop") == 1
    assert queue.execute("pop") == 2
    assert queue.execute("pop") == -1
    assert queue.execute("empty") == 1


def test_run_commands_collects_answers():
    commands = ["push 1", "push 2", "front", "back", "size", "empty",
                "pop", "pop", "pop", "size", "empty", "pop", "push 3",
                "empty", "front"]
    assert run_commands(commands) == [1, 2, 2, 0, 1, 2, -1, 0, 1, -1, 0, 3]


@pytest.mark.parametrize("command", ["jump", "", "push", "push x", "pop 3"])
def test_bad_commands(command):
    with pytest.raises(ValueError):
        CommandQueue().execute(command)


def test_josephus_example():
    assert josephus(7, 3) == [3, 6, 2, 7, 5, 1, 4]


@pytest.mark.parametrize("n,k", [(1, 1), (5, 1), (10, 4), (6, 13)])
def test_josephus_is_permutation(n, k):
    order = josephus(n, k)
    assert sorted(order) == list(range(1, n + 1))


def test_josephus_step_one_keeps_order():
    assert josephus(5, 1) == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("n,k", [(0, 3), (3, 0)])
def test_josephus_rejects_bad_input(n, k):
    with pytest.raises(ValueError):
        josephus(n, k)


def test_printer_queue_example():
    assert printer_queue([9, 8, 9, 7, 8, 7], 3) == 5


def test_printer_queue_single_document():
    assert printer_queue([5], 0) == 1


def test_printer_queue_equal_priorities_keep_order():
    for target in range(4):
        assert printer_queue([2, 2, 2, 2], target) == target + 1


def test_printer_queue_positions_are_permutation():
    priorities = [1, 1, 9, 1, 1, 1]
    positions = [printer_queue(priorities, t) for t in range(len(priorities))]
    assert sorted(positions) == list(range(1, len(priorities) + 1))
    assert positions[2] == 1


@pytest.mark.parametrize("priorities,target", [([1, 2], 2), ([0, 1], 0), ([10], 0)])
def test_printer_queue_rejects_bad_input(priorities, target):
    with pytest.raises(ValueError):
        printer_queue(priorities, target)


def test_last_card_single():
    assert last_card(1) == 1


def test_last_card_two():
    assert last_card(2) == 2


@pytest.mark.parametrize("n", [1, 2, 3, 7, 50])
def test_last_card_in_range(n):
    assert 1 <= last_card(n) <= n


def test_last_card_rejects_zero():
    with pytest.raises(ValueError):
        last_card(0)


def test_zero_sum_without_zeros():
    assert zero_sum([4, 5, 6]) == 15


def test_zero_sum_cancels_latest():
    assert zero_sum([4, 9, 0]) == 4
    assert zero_sum([3, 0, 4, 0]) == 0


def test_zero_sum_empty():
    assert zero_sum([]) == 0


def test_zero_sum_rejects_zero_on_empty():
    with pytest.raises(ValueError):
        zero_sum([0, 1])