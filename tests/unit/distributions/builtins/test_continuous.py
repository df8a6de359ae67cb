"""
Tests for the continuous distributions

Every continuous law is checked for consistency between its density and its
cumulative distribution function, for the shape of the cdf and, where SciPy
implements the same law, against :mod:`scipy.stats`.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import stats
from scipy.integrate import quad

from pysatl_calc.distributions.configuration import get_distributions
from pysatl_calc.types import Kind

from .base import BaseDistributionTest

# name, parameters, two interior points of the support
CASES = [
    ("uniform", (0, 10), 2.0, 7.0),
    ("exp", (2,), 0.1, 1.5),
    ("normal", (1, 2), -1.0, 2.5),
    ("lognormal", (2, 1), 1.0, 3.0),
    ("arcsine", (0, 2), 0.3, 1.5),
    ("beta", (2, 3, 0, 1), 0.1, 0.6),
    ("cauchy", (0, 1), -2.0, 3.0),
    ("chi", (3,), 0.5, 2.0),
    ("chisquared", (4,), 1.0, 5.0),
    ("erlang", (3, 2), 1.0, 8.0),
    ("f", (5, 10), 0.5, 2.0),
    ("gamma", (2.5, 1.5), 1.0, 5.0),
    ("gumbel", (0, 1), -1.0, 1.5),
    ("halfnormal", (0, 1), 0.2, 2.0),
    ("hyperbolicsecant", (0, 1), -1.0, 2.0),
    ("inversegaussian", (2, 1), 0.5, 2.0),
    ("irwinhall", (3,), 0.5, 2.2),
    ("johnsonsu", (1, 1, 2, 1.5), -1.0, 2.0),
    ("kumaraswamy", (2, 3), 0.2, 0.7),
    ("laplace", (0, 1), -1.0, 2.0),
    ("levy", (0, 1), 0.5, 4.0),
    ("logistic", (0, 1), -2.0, 1.0),
    ("loglogistic", (1, 3), 0.5, 2.0),
    ("maxwellboltzmann", (1,), 0.5, 2.5),
    ("pareto", (1, 3), 1.2, 3.0),
    ("pert", (0, 2, 5), 1.0, 3.5),
    ("reciprocal", (1, 10), 2.0, 6.0),
    ("sine", (0, 3), 0.5, 2.0),
    ("studentt", (5, 0), -1.0, 2.0),
    ("trapezoid", (0, 1, 3, 5), 0.5, 4.0),
    ("triangular", (0, 2, 5), 1.0, 3.0),
    ("sawtoothleft", (0, 2), 0.5, 1.5),
    ("sawtoothright", (0, 2), 0.5, 1.5),
    ("uquadratic", (0, 2), 0.2, 1.5),
    ("weibull", (1.5, 0.5), 0.5, 3.0),
    ("wignersemicircle", (0, 2), -1.0, 1.5),
    ("fatiguelife", (0, 1, 0.5), 0.5, 2.0),
    ("frechet", (0, 1, 3), 0.8, 2.0),
    ("logcauchy", (0, 1), 0.5, 3.0),
    ("power", (0, 2, 3), 0.5, 1.5),
    ("rayleigh", (1,), 0.5, 2.0),
    ("cosine", (0, 4), 1.0, 3.0),
    ("loggamma", (2, 3), 1.2, 2.0),
    ("invgamma", (3, 2), 0.5, 2.0),
    ("continuousbernoulli", (0, 1, 0.3), 0.2, 0.8),
    ("halfcauchy", (0, 1), 0.5, 3.0),
    ("loglaplace", (2, 0), 0.5, 2.0),
]

_GUMBEL_SCALE = math.sqrt(6) / math.pi

# name, parameters, equivalent frozen scipy law
SCIPY_CASES = [
    ("uniform", (0, 10), stats.uniform(0, 10)),
    ("exp", (2,), stats.expon(scale=0.5)),
    ("normal", (1, 2), stats.norm(1, 2)),
    (
        "lognormal",
        (2, 1),
        stats.lognorm(
            s=math.sqrt(math.log1p(0.25)), scale=math.exp(math.log(2) - math.log1p(0.25) / 2)
        ),
    ),
    ("arcsine", (0, 2), stats.arcsine(loc=0, scale=2)),
    ("beta", (2, 3, 0, 1), stats.beta(2, 3)),
    ("beta", (2, 3, 1, 4), stats.beta(2, 3, loc=1, scale=3)),
    ("cauchy", (0, 1), stats.cauchy()),
    ("chi", (3,), stats.chi(3)),
    ("chisquared", (4,), stats.chi2(4)),
    ("erlang", (3, 2), stats.erlang(3, scale=2)),
    ("f", (5, 10), stats.f(5, 10)),
    ("gamma", (2.5, 1.5), stats.gamma(2.5, scale=1.5)),
    ("gumbel", (0, 1), stats.gumbel_r(loc=-_GUMBEL_SCALE * np.euler_gamma, scale=_GUMBEL_SCALE)),
    ("halfnormal", (0, 1), stats.halfnorm(scale=math.sqrt(math.pi / 2))),
    ("hyperbolicsecant", (0, 1), stats.hypsecant(scale=2 / math.pi)),
    ("inversegaussian", (2, 1), stats.invgauss(0.5, scale=2)),
    ("johnsonsu", (1, 1, 2, 1.5), stats.johnsonsu(1, 2, loc=1, scale=1.5)),
    ("laplace", (0, 1), stats.laplace()),
    ("levy", (0, 1), stats.levy()),
    ("logistic", (0, 1), stats.logistic()),
    ("loglogistic", (1, 3), stats.fisk(3, scale=1)),
    ("maxwellboltzmann", (1,), stats.maxwell(scale=1)),
    ("pareto", (1, 3), stats.pareto(3, scale=1)),
    ("pert", (0, 2, 5), stats.beta(2.6, 3.4, loc=0, scale=5)),
    ("reciprocal", (1, 10), stats.loguniform(1, 10)),
    ("studentt", (5, 0.5), stats.t(5, loc=0.5)),
    ("trapezoid", (0, 1, 3, 5), stats.trapezoid(0.2, 0.6, loc=0, scale=5)),
    ("triangular", (0, 2, 5), stats.triang(0.4, loc=0, scale=5)),
    ("sawtoothleft", (0, 2), stats.triang(0, loc=0, scale=2)),
    ("sawtoothright", (0, 2), stats.triang(1, loc=0, scale=2)),
    ("weibull", (1.5, 0.5), stats.weibull_min(1.5, scale=2)),
    ("wignersemicircle", (0, 2), stats.semicircular(loc=0, scale=2)),
    ("fatiguelife", (0, 1, 0.5), stats.fatiguelife(0.5, loc=0, scale=1)),
    ("frechet", (0, 1, 3), stats.invweibull(3, loc=0, scale=1)),
    ("power", (0, 2, 3), stats.powerlaw(3, loc=0, scale=2)),
    ("rayleigh", (1,), stats.rayleigh(scale=math.sqrt(2 / math.pi))),
    ("cosine", (0, 4), stats.cosine(loc=2, scale=2 / math.pi)),
    ("invgamma", (3, 2), stats.invgamma(3, scale=2)),
    ("halfcauchy", (0, 1), stats.halfcauchy()),
    ("loglaplace", (2, 0), stats.loglaplace(2)),
]


class TestContinuousDistributions(BaseDistributionTest):
    """Test suite shared by all continuous distributions."""

    def test_cases_cover_catalogue(self):
        """Every continuous distribution of the catalogue is tested."""
        names = {d.name for d in get_distributions(Kind.CONTINUOUS)}
        assert {case[0] for case in CASES} == names

    @pytest.mark.parametrize("name, params, x1, x2", CASES)
    def test_cdf_is_integral_of_pdf(self, name, params, x1, x2):
        """CDF increments equal the integral of the density."""
        distr = self.get_distribution(name)
        integral, _ = quad(lambda x: distr.pdf(x, *params), x1, x2, limit=200)
        increment = distr.cdf(x2, *params) - distr.cdf(x1, *params)
        assert increment == pytest.approx(integral, rel=1e-6, abs=1e-9)

    @pytest.mark.parametrize("name, params, x1, x2", CASES)
    def test_cdf_is_monotone_and_bounded(self, name, params, x1, x2):
        """CDF is non-decreasing with values in [0, 1]."""
        distr = self.get_distribution(name)
        width = x2 - x1
        grid = np.linspace(x1 - 3 * width, x2 + 3 * width, 301)
        values = np.array([distr.cdf(x, *params) for x in grid])

        assert np.all(values >= 0.0)
        assert np.all(values <= 1.0)
        assert np.all(np.diff(values) >= -1e-12)

    @pytest.mark.parametrize("name, params, x1, x2", CASES)
    def test_pdf_is_non_negative(self, name, params, x1, x2):
        """Density is non-negative and positive inside the support."""
        distr = self.get_distribution(name)
        width = x2 - x1
        grid = np.linspace(x1 - 3 * width, x2 + 3 * width, 301)
        assert all(distr.pdf(x, *params) >= 0.0 for x in grid)
        assert distr.pdf(0.5 * (x1 + x2), *params) > 0.0

    @pytest.mark.parametrize("name, params, x1, x2", CASES)
    def test_cdf_limits(self, name, params, x1, x2):
        """CDF is 0 at minus infinity and 1 at plus infinity."""
        distr = self.get_distribution(name)
        assert distr.cdf(-math.inf, *params) == 0.0
        assert distr.cdf(math.inf, *params) == 1.0

    @pytest.mark.parametrize("name, params, frozen", SCIPY_CASES)
    def test_matches_scipy(self, name, params, frozen):
        """PDF and CDF agree with the equivalent scipy.stats law."""
        distr = self.get_distribution(name)
        points = frozen.ppf([0.05, 0.2, 0.35, 0.5, 0.65, 0.8, 0.95])

        pdf_values = np.array([distr.pdf(x, *params) for x in points])
        cdf_values = np.array([distr.cdf(x, *params) for x in points])

        np.testing.assert_allclose(pdf_values, frozen.pdf(points), rtol=1e-7, atol=1e-12)
        np.testing.assert_allclose(cdf_values, frozen.cdf(points), rtol=1e-7, atol=1e-12)


class TestDegenerateLaws(BaseDistributionTest):
    """Laws with a zero-width interval collapse to a point mass."""

    @pytest.mark.parametrize(
        "name, params, point",
        [
            ("uniform", (2, 2), 2.0),
            ("normal", (1.5, 0), 1.5),
            ("lognormal", (3, 0), 3.0),
            ("arcsine", (1, 1), 1.0),
            ("beta", (2, 3, 1, 1), 1.0),
            ("pert", (1, 1, 1), 1.0),
            ("triangular", (1, 1, 1), 1.0),
            ("trapezoid", (1, 1, 1, 1), 1.0),
            ("sawtoothleft", (1, 1), 1.0),
            ("sine", (1, 1), 1.0),
            ("power", (1, 1, 2), 1.0),
        ],
    )
    def test_point_mass(self, name, params, point):
        distr = self.get_distribution(name)
        assert distr.pdf(point, *params) == math.inf
        assert distr.pdf(point + 0.5, *params) == 0.0
        assert distr.cdf(point, *params) == 1.0
        assert distr.cdf(point - 0.5, *params) == 0.0
        assert distr.random(*params) == pytest.approx(point)


class TestUniformDistribution(BaseDistributionTest):
    """Test suite for the uniform distribution."""

    def setup_method(self):
        self.uniform = self.get_distribution("uniform")

    def test_properties(self):
        assert self.uniform.display_name == "Uniform distribution"
        assert self.uniform.parameter_names == ("a", "b")
        assert "Uniform (continuous) distribution" in self.uniform.__doc__

    def test_pdf_values(self):
        x = np.array([-1.0, 0.0, 2.5, 5.0, 6.0])
        actual = np.array([self.uniform.pdf(v, 0, 5) for v in x])
        self.assert_arrays_almost_equal(actual, np.array([0.0, 0.2, 0.2, 0.2, 0.0]))

    def test_order_is_validated(self):
        with pytest.raises(ValueError, match="b has to be >=a"):
            self.uniform.pdf(0, 5, 2)


class TestNormalDistribution(BaseDistributionTest):
    """Test suite for the normal distribution."""

    def setup_method(self):
        self.normal = self.get_distribution("normal")

    def test_standard_values(self):
        assert self.normal.cdf(0, 0, 1) == 0.5
        assert self.normal.pdf(0, 0, 1) == pytest.approx(1 / math.sqrt(2 * math.pi))
        assert self.normal.cdf(1.96, 0, 1) == pytest.approx(0.9750021048517795, rel=1e-9)

    def test_sigma_domain(self):
        with pytest.raises(ValueError, match="sigma has to be >=0 but is -1"):
            self.normal.pdf(0, 0, -1)


class TestIrwinHallDistribution(BaseDistributionTest):
    """Test suite for the Irwin-Hall distribution."""

    def setup_method(self):
        self.irwin_hall = self.get_distribution("irwinhall")

    def test_single_term_is_standard_uniform(self):
        for x in (0.1, 0.5, 0.9):
            assert self.irwin_hall.pdf(x, 1) == pytest.approx(1.0)
            assert self.irwin_hall.cdf(x, 1) == pytest.approx(x)

    def test_two_terms_is_triangular(self):
        assert self.irwin_hall.pdf(0.5, 2) == pytest.approx(0.5)
        assert self.irwin_hall.pdf(1.0, 2) == pytest.approx(1.0)
        assert self.irwin_hall.pdf(1.5, 2) == pytest.approx(0.5)
        assert self.irwin_hall.cdf(1.0, 2) == pytest.approx(0.5)

    def test_symmetry(self):
        for x in (0.3, 1.2, 2.0):
            assert self.irwin_hall.pdf(x, 5) == pytest.approx(self.irwin_hall.pdf(5 - x, 5))
            assert self.irwin_hall.cdf(x, 5) == pytest.approx(1 - self.irwin_hall.cdf(5 - x, 5))

    def test_number_of_terms_is_bounded(self):
        with pytest.raises(ValueError, match="n has to be <=25 but is 26"):
            self.irwin_hall.pdf(1, 26)


class TestContinuousBernoulliDistribution(BaseDistributionTest):
    def setup_method(self):
        self.distr = self.get_distribution("continuousbernoulli")

    def test_half_is_uniform(self):
        assert self.distr.pdf(0.3, 0, 1, 0.5) == pytest.approx(1.0)
        assert self.distr.cdf(0.3, 0, 1, 0.5) == pytest.approx(0.3)

    def test_scaled_interval(self):
        assert self.distr.pdf(3.0, 2, 4, 0.5) == pytest.approx(0.5)
        assert self.distr.cdf(3.0, 2, 4, 0.5) == pytest.approx(0.5)


class TestKumaraswamyDistribution(BaseDistributionTest):
    def test_closed_form(self):
        distr = self.get_distribution("kumaraswamy")
        x = 0.4
        assert distr.pdf(x, 2, 3) == pytest.approx(2 * 3 * x * (1 - x**2) ** 2)
        assert distr.cdf(x, 2, 3) == pytest.approx(1 - (1 - x**2) ** 3)


class TestLogGammaDistribution(BaseDistributionTest):
    def test_log_transform_is_gamma(self):
        distr = self.get_distribution("loggamma")
        for x in (1.5, 2.0, 4.0):
            expected = stats.gamma(2, scale=1 / 3).cdf(math.log(x))
            assert distr.cdf(x, 2, 3) == pytest.approx(expected, rel=1e-9)
        assert distr.pdf(0.5, 2, 3) == 0.0


class TestLogCauchyDistribution(BaseDistributionTest):
    def test_log_transform_is_cauchy(self):
        distr = self.get_distribution("logcauchy")
        for x in (0.5, 1.0, 3.0):
            assert distr.cdf(x, 0.2, 1.5) == pytest.approx(
                stats.cauchy(0.2, 1.5).cdf(math.log(x)), rel=1e-9
            )


class TestGumbelDistribution(BaseDistributionTest):
    def test_mean_and_std_parametrization(self):
        distr = self.get_distribution("gumbel")
        samples = self.draw(distr, 3, 2)
        assert np.mean(samples) == pytest.approx(3.0, abs=0.1)
        assert np.std(samples) == pytest.approx(2.0, abs=0.1)


class TestUQuadraticDistribution(BaseDistributionTest):
    def test_closed_form(self):
        distr = self.get_distribution("uquadratic")
        # alpha = 12/8, beta = 1
        assert distr.pdf(0.0, 0, 2) == pytest.approx(1.5)
        assert distr.pdf(1.0, 0, 2) == 0.0
        assert distr.cdf(1.0, 0, 2) == pytest.approx(0.5)
