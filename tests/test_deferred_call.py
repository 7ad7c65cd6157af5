from core.deferred_call import DeferredCall


def test_fires_once_after_delay():
    call = DeferredCall(delay=0.5)
    call.schedule(10.0)
    assert call.pending
    assert not call.fire_if_due(10.49)
    assert call.fire_if_due(10.5)
    assert not call.pending
    assert not call.fire_if_due(11.0)


def test_idle_call_never_fires():
    assert not DeferredCall().fire_if_due(1e9)


def test_cancel_preempts_pending_call():
    call = DeferredCall(delay=0.5)
    call.schedule(0.0)
    call.cancel()
    assert not call.pending
    assert not call.fire_if_due(1.0)


def test_reschedule_moves_deadline():
    call = DeferredCall(delay=0.5)
    call.schedule(0.0)
    call.schedule(0.4)
    assert not call.fire_if_due(0.6)
    assert call.fire_if_due(0.9)
