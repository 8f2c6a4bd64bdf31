from GroupSecurity.action_rate_limiting import (
    RateLimitResult,
    check_group_create_rate_limit,
    check_join_request_rate_limit,
    group_create_key,
    join_request_key,
    peek_group_create_rate_limit,
    record_group_create,
)


def test_unknown_key_is_allowed(limiter):
    assert limiter.check("group_create_u1") == RateLimitResult(allowed=True)


def test_recorded_key_waits_rounded_up(limiter, clock):
    limiter.record("group_create_u1", 60)
    clock.advance(15.2)
    assert limiter.check("group_create_u1") == RateLimitResult(allowed=False, wait_time=45)


def test_key_is_allowed_once_window_elapsed(limiter, clock):
    limiter.record("k", 60)
    clock.advance(60)
    assert limiter.check("k").allowed is True


def test_clear_forgets_key(limiter):
    limiter.record("k", 60)
    limiter.clear("k")
    limiter.clear("never-recorded")
    assert limiter.check("k").allowed is True
    assert len(limiter) == 0


def test_check_and_record_only_records_allowed_attempts(limiter, clock):
    assert limiter.check_and_record("k", 10).allowed is True
    clock.advance(4)
    assert limiter.check_and_record("k", 10) == RateLimitResult(allowed=False, wait_time=6)
    clock.advance(6)
    assert limiter.check_and_record("k", 10).allowed is True


def test_elapsed_keys_are_dropped(limiter, clock):
    for n in range(50):
        limiter.check_and_record(join_request_key("u1", f"g{n}"), 10)
    assert len(limiter) == 50

    clock.advance(10)
    limiter.record("group_create_u2", 60)
    assert len(limiter) == 1

    clock.advance(30)
    limiter.check_and_record("join_request_u3_g1", 10)
    assert len(limiter) == 2


def test_group_create_cooldown_is_per_user(limiter, clock):
    assert check_group_create_rate_limit("u1", limiter).allowed is True
    assert check_group_create_rate_limit("u2", limiter).allowed is True
    clock.advance(59.5)
    assert check_group_create_rate_limit("u1", limiter) == RateLimitResult(allowed=False, wait_time=1)
    clock.advance(0.5)
    assert check_group_create_rate_limit("u1", limiter).allowed is True


def test_peek_does_not_start_a_cooldown(limiter, clock):
    assert peek_group_create_rate_limit("u1", limiter).allowed is True
    assert peek_group_create_rate_limit("u1", limiter).allowed is True
    record_group_create("u1", limiter)
    clock.advance(20)
    assert peek_group_create_rate_limit("u1", limiter) == RateLimitResult(allowed=False, wait_time=40)


def test_join_request_cooldown_is_per_user_and_group(limiter, clock):
    assert check_join_request_rate_limit("u1", "g1", limiter).allowed is True
    assert check_join_request_rate_limit("u1", "g2", limiter).allowed is True
    assert check_join_request_rate_limit("u1", "g1", limiter) == RateLimitResult(allowed=False, wait_time=10)
    clock.advance(10)
    assert check_join_request_rate_limit("u1", "g1", limiter).allowed is True


def test_keys():
    assert group_create_key("u1") == "group_create_u1"
    assert join_request_key("u1", "g9") == "join_request_u1_g9"
