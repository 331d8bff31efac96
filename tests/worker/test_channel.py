import asyncio

import pytest
from pytest import raises

from printer.models import JobSnapshot, StateSnapshot
from worker import ChannelClosed, EventChannel, JobUpdate, StateUpdate


def job(completion: float) -> JobUpdate:
    return JobUpdate(JobSnapshot(file_name="A.gcode", completion=completion))


def state(status: str) -> StateUpdate:
    return StateUpdate(StateSnapshot(status=status))


@pytest.fixture
def channel() -> EventChannel:
    return EventChannel(capacity=2)


async def test_events_are_delivered_in_order(channel):
    job_sender, state_sender = channel.sender(), channel.sender()
    receiver = channel.receiver()

    await job_sender.send(job(1))
    await state_sender.send(state("Printing"))

    assert await receiver.recv() == job(1)
    assert await receiver.recv() == state("Printing")


async def test_same_kind_events_are_not_coalesced(channel):
    sender, receiver = channel.sender(), channel.receiver()

    await sender.send(job(1))
    await sender.send(job(2))

    assert [await receiver.recv(), await receiver.recv()] == [job(1), job(2)]


async def test_backpressure(channel):
    sender, receiver = channel.sender(), channel.receiver()
    events = [job(i) for i in range(5)]

    async def produce() -> None:
        for event in events:
            await sender.send(event)

    producer = asyncio.create_task(produce())
    await asyncio.sleep(0.01)

    assert not producer.done(), "producer should be suspended on a full channel"
    assert channel.qsize() == 2

    received = [await receiver.recv() for _ in events]
    await asyncio.wait_for(producer, timeout=1)

    assert received == events


async def test_at_most_two_senders(channel):
    channel.sender()
    channel.sender()

    with raises(RuntimeError):
        channel.sender()


async def test_single_receiver(channel):
    channel.receiver()

    with raises(RuntimeError):
        channel.receiver()


async def test_close_ends_iteration(channel):
    sender, receiver = channel.sender(), channel.receiver()

    async def consume() -> list:
        return [event async for event in receiver]

    consumer = asyncio.create_task(consume())
    await sender.send(job(1))
    await asyncio.sleep(0.01)
    channel.close()

    assert await asyncio.wait_for(consumer, timeout=1) == [job(1)]


async def test_send_after_close(channel):
    sender = channel.sender()
    channel.close()

    with raises(ChannelClosed):
        await sender.send(job(1))


async def test_close_wakes_blocked_sender(channel):
    sender = channel.sender()
    await sender.send(job(1))
    await sender.send(job(2))

    blocked = asyncio.create_task(sender.send(job(3)))
    await asyncio.sleep(0.01)
    channel.close()

    with raises(ChannelClosed):
        await asyncio.wait_for(blocked, timeout=1)
