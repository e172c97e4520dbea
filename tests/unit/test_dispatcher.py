import pytest
import boreas
from unittest import mock


def test_dispatcher_calls_multiple_listener():
    listener1 = mock.Mock(return_value=True)
    listener2 = mock.Mock(return_value=True)

    dispatcher = boreas.Dispatcher()
    dispatcher.on(boreas.INVALIDATION_SUBMITTED, listener1)
    dispatcher.on(boreas.INVALIDATION_SUBMITTED, listener2)

    returned = dispatcher.emit(boreas.INVALIDATION_SUBMITTED,
                               invalidation_id='I2J0I21PCUYOIK')

    assert returned == True
    listener1.assert_called_once_with(invalidation_id='I2J0I21PCUYOIK')
    listener2.assert_called_once_with(invalidation_id='I2J0I21PCUYOIK')


def test_dispatcher_calls_early_stop():
    listener1 = mock.Mock(return_value=False)
    listener2 = mock.Mock(return_value=True)

    dispatcher = boreas.Dispatcher()
    dispatcher.on(boreas.INVALIDATION_PENDING, listener1)
    dispatcher.on(boreas.INVALIDATION_PENDING, listener2)

    returned = dispatcher.emit(boreas.INVALIDATION_PENDING,
                               invalidation_id='I2J0I21PCUYOIK')

    assert returned == False
    listener1.assert_called_once_with(invalidation_id='I2J0I21PCUYOIK')
    listener2.assert_not_called()


def test_dispatchers_do_not_share_listeners():
    listener = mock.Mock(return_value=True)

    first = boreas.Dispatcher()
    second = boreas.Dispatcher()
    first.on(boreas.INVALIDATION_COMPLETED, listener)

    second.emit(boreas.INVALIDATION_COMPLETED,
                invalidation_id='I2J0I21PCUYOIK')

    listener.assert_not_called()


def test_dispatcher_accepts_every_invalidation_event():
    dispatcher = boreas.Dispatcher()

    for event_name in boreas.INVALIDATION_EVENTS:
        assert dispatcher.emit(event_name) == True


def test_dispatcher_rejects_unknown_events():
    dispatcher = boreas.Dispatcher()

    with pytest.raises(ValueError):
        dispatcher.on('invalidation.unknown', mock.Mock())

    with pytest.raises(ValueError):
        dispatcher.emit('invalidation.unknown')


def test_dispatcher_with_custom_events():
    listener = mock.Mock(return_value=True)
    dispatcher = boreas.Dispatcher(events=('test', ))
    dispatcher.on('test', listener)

    dispatcher.emit('test', some='args')

    listener.assert_called_once_with(some='args')
    with pytest.raises(ValueError):
        dispatcher.on(boreas.INVALIDATION_SUBMITTED, listener)
