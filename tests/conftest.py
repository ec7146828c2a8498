"""Shared fixtures for the Ricker model tests."""

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import pytest

from config.parameters import ModelParams, parameter_grid


@pytest.fixture
def params():
    return ModelParams()


@pytest.fixture
def grid():
    """2 growth rates × 2 carrying capacities"""
    return parameter_grid([1.5, 2.8], [50.0, 100.0], n0=10.0, tf=30)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')
