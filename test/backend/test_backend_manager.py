import threading

import numpy as np
import pytest

from quadrule.backend import BackendManager, TensorLike
from quadrule.backend import backend_manager as bm


class TestBackendManager:
    def test_default_backend(self):
        manager = BackendManager(default_backend='numpy')
        assert manager.get_current_backend().backend_name == 'numpy'
        assert manager.float64 is np.float64
        assert isinstance(manager.zeros(3), TensorLike)

    def test_set_backend(self):
        bm.set_backend('numpy')
        assert bm.get_current_backend().backend_name == 'numpy'
        np.testing.assert_array_equal(bm.prod(bm.asarray([[1.0, 2.0], [3.0, 4.0]]), axis=-1),
                                      [2.0, 12.0])

    def test_unknown_backend(self):
        manager = BackendManager(default_backend='numpy')
        with pytest.raises(RuntimeError):
            manager.set_backend('no_such_backend')

    def test_no_default_backend(self):
        manager = BackendManager()
        with pytest.raises(RuntimeError):
            manager.get_current_backend()

    def test_thread_local_default(self):
        manager = BackendManager(default_backend='numpy')
        names = []
        thread = threading.Thread(
            target=lambda: names.append(manager.get_current_backend().backend_name))
        thread.start()
        thread.join()
        assert names == ['numpy']

    def test_readonly(self):
        a = bm.zeros((2, 2))
        b = bm.readonly(a)
        assert not b.flags.writeable
        assert a.flags.writeable
        with pytest.raises(ValueError):
            b[0, 0] = 1.0
        with pytest.raises(ValueError):
            b.flags.writeable = True
        a[0, 0] = 2.0
        assert b[0, 0] == 0.0

    def test_concat(self):
        a = bm.concat([bm.zeros(2), bm.ones(3)])
        np.testing.assert_array_equal(a, [0, 0, 1, 1, 1])
