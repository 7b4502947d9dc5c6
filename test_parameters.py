#!/usr/bin/env python3
"""
Tests for the swarm Parameters bundle and its range correction.
"""

from SWARM_OPT.CONFIG import NUM_PARTICLES, C_GLOBAL, C_LOCAL, MAX_V, MAX_ITERATIONS, MAX_CONST_ITERATIONS
from SWARM_OPT.Logs.logger import log_header
from SWARM_OPT.PSO.Parameters import Parameters


def test_defaults_come_from_config_and_are_valid():
    log_header("=== Parameters Defaults ===", "test_parameters")
    params = Parameters()
    assert params.num_particles == NUM_PARTICLES
    assert params.c_global == C_GLOBAL
    assert params.c_local == C_LOCAL
    assert params.max_v == MAX_V
    assert params.max_iterations == MAX_ITERATIONS
    assert params.max_const_iterations == MAX_CONST_ITERATIONS
    assert params.reflect is True
    assert params.check() is True


def test_negative_particle_count_is_clamped_to_one():
    params = Parameters(num_particles=-5)
    assert params.check() is False
    assert params.num_particles == 1


def test_every_field_is_clamped_into_range():
    params = Parameters(num_particles=5000, c_global=-1.0, c_local=3.5, max_v=0.0,
                        max_iterations=0, max_const_iterations=0)
    assert params.check() is False
    assert params.num_particles == 1000
    assert params.c_global == 0.0
    assert params.c_local == 2.0
    assert params.max_v == 1e-6
    assert params.max_iterations == 1
    # Lower bound wins when max_iterations < 2
    assert params.max_const_iterations == 2


def test_const_iterations_bounded_by_clamped_max_iterations():
    params = Parameters(max_iterations=20000, max_const_iterations=15000)
    assert params.check() is False
    assert params.max_iterations == 10000
    assert params.max_const_iterations == 10000

    params = Parameters(max_iterations=50, max_const_iterations=80)
    assert params.check() is False
    assert params.max_const_iterations == 50


def test_const_iterations_lower_bound_wins_when_max_iterations_is_one():
    params = Parameters(max_iterations=1, max_const_iterations=25)
    assert params.check() is False
    assert params.max_iterations == 1
    assert params.max_const_iterations == 2

    # stays put on later checks
    assert params.check() is True
    assert params.max_const_iterations == 2


def test_check_is_idempotent_after_correction():
    params = Parameters(c_global=9.0)
    assert params.check() is False
    assert params.check() is True


def test_copy_is_independent():
    params = Parameters(num_particles=-1)
    snapshot = params.copy()
    assert snapshot.check() is False
    assert params.num_particles == -1
    assert snapshot.num_particles == 1


if __name__ == "__main__":
    test_defaults_come_from_config_and_are_valid()
    test_negative_particle_count_is_clamped_to_one()
    test_every_field_is_clamped_into_range()
    test_const_iterations_bounded_by_clamped_max_iterations()
    test_const_iterations_lower_bound_wins_when_max_iterations_is_one()
    test_check_is_idempotent_after_correction()
    test_copy_is_independent()
