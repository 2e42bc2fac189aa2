from conftest import charging, discharging

from charge_notifier.models.sample import ChargeState, Sample
from charge_notifier.models.session import Session, SessionKind
from charge_notifier.models.settings import Config
from charge_notifier.session import build_intent, classify, evaluate


def _cfg(**overrides) -> Config:
    base = dict(high_threshold=85, low_threshold=20, max_attempts=3)
    base.update(overrides)
    return Config(**base)


def _check_invariants(session: Session, config: Config) -> None:
    assert session.attempts_made <= config.max_attempts
    if session.kind is SessionKind.NONE:
        assert session.attempts_made == 0


def _feed(samples, config, session=None):
    session = session or Session()
    out = []
    for sample in samples:
        out.append(evaluate(sample, config, session))
        _check_invariants(session, config)
    return out, session


def test_classify_requires_matching_charge_state():
    cfg = _cfg()
    assert classify(charging(90), cfg) == (True, False)
    assert classify(discharging(90), cfg) == (False, False)
    assert classify(discharging(10), cfg) == (False, True)
    assert classify(charging(10), cfg) == (False, False)
    assert classify(Sample(ChargeState.OTHER, 100), cfg) == (False, False)


def test_classify_thresholds_are_inclusive():
    cfg = _cfg()
    assert classify(charging(85), cfg) == (True, False)
    assert classify(discharging(20), cfg) == (False, True)


def test_build_intent_rounds_percentage():
    intent = build_intent(charging(86.6), SessionKind.ABOVE_HIGH)
    assert intent.summary == "Battery Status: Charging"
    assert intent.body == "Charge: 87%"
    intent = build_intent(discharging(14.2), SessionKind.BELOW_LOW)
    assert intent.summary == "Battery Status: Discharging"
    assert intent.body == "Charge: 14%"


def test_high_threshold_session_exhausts_and_rearms_after_safe_zone():
    cfg = _cfg()
    samples = [charging(p) for p in (80, 86, 87, 88, 89, 50, 90)]
    out, session = _feed(samples, cfg)

    assert out[0] is None
    assert [i.body for i in out[1:4]] == ["Charge: 86%", "Charge: 87%", "Charge: 88%"]
    assert all(i.summary == "Battery Status: Charging" for i in out[1:4])
    assert out[4] is None
    assert out[5] is None
    assert out[6] is not None and out[6].body == "Charge: 90%"
    assert session.kind is SessionKind.ABOVE_HIGH
    assert session.attempts_made == 1


def test_exhausted_session_records_last_ended_kind():
    cfg = _cfg(max_attempts=3)
    _, session = _feed([charging(p) for p in (86, 87, 88)], cfg)
    assert session.kind is SessionKind.NONE
    assert session.attempts_made == 0
    assert session.last_ended_kind is SessionKind.ABOVE_HIGH

    evaluate(charging(50), cfg, session)
    assert session.last_ended_kind is SessionKind.NONE


def test_low_threshold_single_attempt_is_debounced():
    cfg = _cfg(max_attempts=1)
    out, session = _feed([discharging(15), discharging(14)], cfg)
    assert out[0] is not None
    assert out[0].summary == "Battery Status: Discharging"
    assert out[0].body == "Charge: 15%"
    assert out[1] is None
    assert session.last_ended_kind is SessionKind.BELOW_LOW

    out, session = _feed([discharging(70), discharging(10)], cfg, session)
    assert out[0] is None
    assert out[1] is not None and out[1].body == "Charge: 10%"


def test_opposite_kind_starts_on_next_tick():
    cfg = _cfg(max_attempts=1)
    out, session = _feed([charging(90), discharging(10)], cfg)
    assert out[0].kind is SessionKind.ABOVE_HIGH
    assert out[1] is not None
    assert out[1].kind is SessionKind.BELOW_LOW
    assert session.last_ended_kind is SessionKind.BELOW_LOW


def test_condition_exit_ends_session_and_debounces_same_kind():
    cfg = _cfg(max_attempts=5)
    out, session = _feed([charging(86), charging(80)], cfg)
    assert out[0] is not None
    assert out[1] is None
    assert session.kind is SessionKind.NONE
    assert session.last_ended_kind is SessionKind.ABOVE_HIGH

    # The exit tick ended the session; it takes another safe tick to re-arm.
    out, session = _feed([charging(86), charging(80), charging(86)], cfg, session)
    assert out == [None, None, out[2]]
    assert out[2] is not None


def test_safe_zone_never_alerts_and_goes_idle():
    cfg = _cfg(max_attempts=10)
    session = Session()
    evaluate(charging(95), cfg, session)
    assert session.is_active()
    for sample in (charging(50), discharging(50), Sample(ChargeState.OTHER, 99)):
        assert evaluate(sample, cfg, session) is None
        assert session.kind is SessionKind.NONE
    assert session.last_ended_kind is SessionKind.NONE


def test_attempts_never_exceed_limit():
    cfg = _cfg(max_attempts=4)
    out, session = _feed([charging(95)] * 10, cfg)
    assert len([i for i in out if i is not None]) == 4
    assert out[4:] == [None] * 6
    assert session.kind is SessionKind.NONE


def test_mismatched_condition_keeps_session_without_alert():
    cfg = _cfg(max_attempts=3)
    session = Session()
    assert evaluate(charging(90), cfg, session) is not None
    # Unplugged and already under the low threshold: not the safe zone, but
    # the active high session's condition no longer holds.
    assert evaluate(discharging(10), cfg, session) is None
    assert session.kind is SessionKind.ABOVE_HIGH
    assert session.attempts_made == 1
    assert evaluate(charging(91), cfg, session) is not None
    assert session.attempts_made == 2


def test_disabled_high_threshold_never_fires():
    cfg = _cfg(high_enabled=False)
    out, session = _feed([charging(100)] * 20, cfg)
    assert out == [None] * 20
    assert session.kind is SessionKind.NONE


def test_disabled_low_threshold_never_fires():
    cfg = _cfg(low_enabled=False)
    out, session = _feed([discharging(1)] * 20, cfg)
    assert out == [None] * 20
    assert session.kind is SessionKind.NONE
