from __future__ import annotations

import threading

import numpy as np
import pytest

from svm_engine.components.models import SVM
from svm_engine.components.solver.libsvm_solver import LibsvmSolver
from svm_engine.contracts.kernels import (
    LinearKernel,
    PolynomialKernel,
    RadialBasisFunctionKernel,
    SigmoidKernel,
)
from svm_engine.contracts.svm_configs import (
    CSVCConfig,
    EpsilonSVRConfig,
    NuSVCConfig,
    NuSVRConfig,
    OneClassConfig,
)
from svm_engine.contracts.types import SvmType
from svm_engine.errors import (
    DimensionMismatch,
    InvalidConfiguration,
    InvalidDataset,
    SolverFailure,
    Untrained,
    UnsupportedOperation,
)


@pytest.fixture
def csvc_rbf(runner):
    return SVM(CSVCConfig(C=1, probability=True), RadialBasisFunctionKernel(0.5), runner=runner, seed=0)


class TestConstruction:
    def test_nu_svc_with_sigmoid_kernel(self):
        svm = SVM.from_options({"type": SvmType.NU_SVC, "kernel": SigmoidKernel(2), "nu": 0.4})
        assert svm.get_kernel_type() == "SIGMOID"
        assert svm.get_svm_type() == "NU_SVC"
        assert svm.is_trained() is False

    def test_epsilon_svr_with_linear_kernel(self):
        svm = SVM.from_options(
            {"type": "EPSILON_SVR", "kernel": LinearKernel(), "C": 1, "epsilon": 0.1}
        )
        assert svm.get_kernel_type() == "LINEAR"
        assert svm.get_svm_type() == "EPSILON_SVR"
        assert not svm.is_trained()
        assert svm.labels == ()
        assert svm.n_features is None

    def test_kernel_given_as_options(self):
        svm = SVM.from_options({"type": "C_SVC", "kernel": {"type": "POLY", "degree": 2, "gamma": 1}})
        assert svm.kernel == PolynomialKernel(2, 1)

    def test_rejects_non_contracts(self):
        with pytest.raises(InvalidConfiguration):
            SVM({"type": "C_SVC"}, LinearKernel())
        with pytest.raises(InvalidConfiguration):
            SVM(CSVCConfig(), "rbf")
        with pytest.raises(InvalidConfiguration):
            SVM.from_options({"type": "C_SVC"})
        with pytest.raises(InvalidConfiguration):
            SVM.from_options({"type": "C_SVC", "kernel": {"type": "RBF"}})


class TestCSVCOnNormalizedXor:
    def test_train_marks_model_trained(self, csvc_rbf, xor_norm_problem):
        assert csvc_rbf.train(xor_norm_problem) is csvc_rbf
        assert csvc_rbf.is_trained()
        assert csvc_rbf.n_features == 2
        assert csvc_rbf.n_support > 0

    def test_labels_are_sorted(self, csvc_rbf, xor_norm_problem):
        csvc_rbf.train(list(reversed(xor_norm_problem)))
        assert csvc_rbf.labels == (0.0, 1.0)
        assert list(csvc_rbf.labels) == [0, 1]

    def test_perfect_on_training_set(self, csvc_rbf, xor_norm_problem):
        csvc_rbf.train(xor_norm_problem)
        for features, label in xor_norm_problem:
            assert csvc_rbf.predict(features) == label

    def test_prediction_is_deterministic(self, csvc_rbf, xor_norm_problem):
        csvc_rbf.train(xor_norm_problem)
        first = [csvc_rbf.decision_values(f) for f, _ in xor_norm_problem]
        second = [csvc_rbf.decision_values(f) for f, _ in xor_norm_problem]
        assert first == second

    def test_probabilities_sum_to_one(self, csvc_rbf, xor_norm_problem):
        csvc_rbf.train(xor_norm_problem)
        for features, _ in xor_norm_problem:
            probs = csvc_rbf.predict_probabilities(features)
            assert list(probs) == list(csvc_rbf.labels)
            assert all(0.0 <= p <= 1.0 for p in probs.values())
            assert sum(probs[label] for label in csvc_rbf.labels) == pytest.approx(1.0, abs=1e-5)

    def test_predict_many_matches_predict(self, csvc_rbf, xor_norm_problem):
        csvc_rbf.train(xor_norm_problem)
        rows = [f for f, _ in xor_norm_problem]
        assert csvc_rbf.predict_many(rows) == [csvc_rbf.predict(r) for r in rows]

    def test_dimension_mismatch(self, csvc_rbf, xor_norm_problem):
        csvc_rbf.train(xor_norm_problem)
        with pytest.raises(DimensionMismatch):
            csvc_rbf.predict([1, 1, 1])
        with pytest.raises(DimensionMismatch):
            csvc_rbf.predict_probabilities([1])


class TestAsync:
    def test_train_async_invokes_callback_once(self, csvc_rbf, xor_norm_problem):
        calls = []
        done = threading.Event()

        def on_done(future):
            calls.append(future.exception())
            done.set()

        future = csvc_rbf.train_async(xor_norm_problem, on_done)
        assert future.result(timeout=30) is csvc_rbf
        assert done.wait(timeout=30)
        assert calls == [None]
        assert csvc_rbf.is_trained()

    def test_train_async_reports_errors_through_the_future(self, csvc_rbf):
        errors = []
        done = threading.Event()

        def on_done(future):
            errors.append(future.exception())
            done.set()

        future = csvc_rbf.train_async([], on_done)
        assert done.wait(timeout=30)
        assert len(errors) == 1
        assert isinstance(errors[0], InvalidDataset)
        with pytest.raises(InvalidDataset):
            future.result()
        assert not csvc_rbf.is_trained()

    def test_predict_async(self, csvc_rbf, xor_norm_problem):
        csvc_rbf.train(xor_norm_problem)
        futures = [csvc_rbf.predict_async(f) for f, _ in xor_norm_problem]
        assert [f.result(timeout=30) for f in futures] == [label for _, label in xor_norm_problem]

    def test_predict_probabilities_async(self, csvc_rbf, xor_norm_problem):
        csvc_rbf.train(xor_norm_problem)
        futures = [csvc_rbf.predict_probabilities_async(f) for f, _ in xor_norm_problem]
        for future in futures:
            probs = future.result(timeout=30)
            assert sum(probs[label] for label in csvc_rbf.labels) == pytest.approx(1.0, abs=1e-5)

    def test_predict_async_untrained(self, csvc_rbf):
        with pytest.raises(Untrained):
            csvc_rbf.predict_async([0, 0]).result(timeout=30)


class TestUntrained:
    @pytest.mark.parametrize(
        "call",
        [
            lambda m: m.predict([0, 0]),
            lambda m: m.predict_many([[0, 0]]),
            lambda m: m.predict_probabilities([0, 0]),
            lambda m: m.decision_values([0, 0]),
            lambda m: m.evaluate([([0, 0], 0)]),
        ],
    )
    def test_operations_fail(self, csvc_rbf, call):
        with pytest.raises(Untrained):
            call(csvc_rbf)


class TestProbabilitySupport:
    def test_not_configured(self, runner, xor_norm_problem):
        svm = SVM(CSVCConfig(), RadialBasisFunctionKernel(0.5), runner=runner)
        svm.train(xor_norm_problem)
        with pytest.raises(UnsupportedOperation):
            svm.predict_probabilities([1, 1])

    def test_regression_has_no_probabilities(self, xor_norm_problem):
        svm = SVM(EpsilonSVRConfig(), LinearKernel())
        svm.train(xor_norm_problem)
        with pytest.raises(UnsupportedOperation):
            svm.predict_probabilities([1, 1])

    def test_multiclass_probabilities(self, three_clusters):
        svm = SVM(NuSVCConfig(nu=0.3, probability=True), RadialBasisFunctionKernel(0.5), seed=1)
        svm.train(three_clusters)
        assert svm.labels == (0.0, 1.0, 2.0)
        probs = svm.predict_probabilities([5.0, 5.0])
        assert list(probs) == [0.0, 1.0, 2.0]
        assert sum(probs.values()) == pytest.approx(1.0, abs=1e-5)
        assert svm.fitted.has_probability_model


class TestOtherVariants:
    def test_multiclass_prediction(self, three_clusters):
        svm = SVM(CSVCConfig(C=10), RadialBasisFunctionKernel(0.5)).train(three_clusters)
        assert svm.predict([0.1, 0.1]) == 0
        assert svm.predict([5.2, 4.9]) == 1
        assert svm.predict([-5.0, 5.1]) == 2
        # one value per label pair
        assert len(svm.decision_values([0, 0])) == 3

    def test_one_class(self):
        grid = [([x, y], 1) for x in np.linspace(-1, 1, 5) for y in np.linspace(-1, 1, 5)]
        svm = SVM(OneClassConfig(nu=0.1), RadialBasisFunctionKernel(0.5)).train(grid)
        assert svm.labels == ()
        assert svm.predict([0.0, 0.0]) == 1.0
        assert svm.predict([10.0, 10.0]) == -1.0

    def test_nu_svr_fits_linear_target(self):
        data = [([x], 2.0 * x + 1.0) for x in np.linspace(-2, 2, 21)]
        svm = SVM(NuSVRConfig(C=10, nu=0.5), LinearKernel()).train(data)
        assert svm.predict([0.5]) == pytest.approx(2.0, abs=0.2)

    def test_polynomial_kernel_solves_xor(self, xor_norm_problem):
        svm = SVM(CSVCConfig(C=10), PolynomialKernel(2, 1.0, 0.0)).train(xor_norm_problem)
        assert [svm.predict(f) for f, _ in xor_norm_problem] == [0, 1, 1, 0]

    def test_classification_labels_must_be_integers(self):
        with pytest.raises(InvalidDataset):
            SVM(CSVCConfig(), LinearKernel()).train([([0.0], 0.5), ([1.0], 1.0)])


class TestTrainingFailures:
    def test_infeasible_nu(self):
        data = [([float(i)], 1 if i == 0 else 0) for i in range(10)]
        svm = SVM(NuSVCConfig(nu=0.9), LinearKernel())
        with pytest.raises(SolverFailure):
            svm.train(data)
        assert not svm.is_trained()

    def test_iteration_limit(self, repeated_xor):
        svm = SVM(CSVCConfig(max_iter=1), RadialBasisFunctionKernel(0.5))
        with pytest.raises(SolverFailure):
            svm.train(repeated_xor)

    def test_failed_retrain_keeps_previous_parameters(self, csvc_rbf, xor_norm_problem):
        csvc_rbf.train(xor_norm_problem)
        before = csvc_rbf.fitted
        with pytest.raises(SolverFailure):
            csvc_rbf.train([([0, 0], 1), ([1, 1], 1)])
        with pytest.raises(InvalidDataset):
            csvc_rbf.train([([0, 0], 1), ([1, 1, 1], 0)])
        assert csvc_rbf.fitted is before
        assert csvc_rbf.labels == (0.0, 1.0)

    def test_retrain_replaces_parameters(self, csvc_rbf, xor_norm_problem, three_clusters):
        csvc_rbf.train(xor_norm_problem)
        csvc_rbf.train(three_clusters)
        assert csvc_rbf.labels == (0.0, 1.0, 2.0)


class _RecordingSolver:
    def __init__(self):
        self.calls = []
        self._inner = LibsvmSolver()

    def fit(self, cfg, kernel, X, y, *, seed=None):
        self.calls.append((cfg, kernel, X.copy(), y.copy(), seed))
        return self._inner.fit(cfg, kernel, X, y, seed=seed)


def test_training_delegates_to_the_solver(xor_norm_problem):
    solver = _RecordingSolver()
    cfg, kernel = CSVCConfig(C=2), RadialBasisFunctionKernel(0.5)
    SVM(cfg, kernel, solver=solver, seed=7).train(xor_norm_problem)

    assert len(solver.calls) == 1
    got_cfg, got_kernel, X, y, seed = solver.calls[0]
    assert got_cfg is cfg and got_kernel is kernel and seed == 7
    np.testing.assert_array_equal(X, [[-1, -1], [-1, 1], [1, -1], [1, 1]])
    np.testing.assert_array_equal(y, [0, 1, 1, 0])


def test_spawn_is_untrained_copy(csvc_rbf, xor_norm_problem):
    csvc_rbf.train(xor_norm_problem)
    clone = csvc_rbf.spawn()
    assert not clone.is_trained()
    assert clone.config == csvc_rbf.config
    assert clone.kernel == csvc_rbf.kernel
