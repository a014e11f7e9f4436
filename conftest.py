import inspect
import unittest

from _pytest.unittest import UnitTestCase
from testscenarios import WithScenarios


def pytest_pycollect_makeitem(collector, name, obj):
    '''Collect each testscenarios scenario as its own unittest class.

    pytest binds the test method to the collected instance, while
    WithScenarios.run() runs clones of it, so the clones' setUp() never
    reaches the instance the test body uses. Expanding the scenarios at
    collection time gives every scenario a plain TestCase run.
    '''
    if not (inspect.isclass(obj) and issubclass(obj, unittest.TestCase)
            and issubclass(obj, WithScenarios)):
        return None
    scenarios = getattr(obj, 'scenarios', None)
    if not scenarios:
        return None
    items = []
    for scenario_name, params in scenarios:
        attrs = dict(params, scenarios=None, __module__=obj.__module__)
        cls_name = '{0}[{1}]'.format(name, scenario_name)
        cls = type(cls_name, (obj,), attrs)
        # pytest resolves collected classes by name on their module
        setattr(collector.obj, cls_name, cls)
        items.append(UnitTestCase.from_parent(collector, name=cls_name,
                                              obj=cls))
    return items
