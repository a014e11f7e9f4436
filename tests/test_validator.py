import unittest

import jenkinsfacade
from jenkinsfacade.validator import validate_response
from tests.helper import build_response


class ValidateResponseTest(unittest.TestCase):

    def test_accepts_success_and_redirects(self):
        for status in range(200, 400):
            validate_response(build_response(status), 'never raised')

    def test_rejects_other_statuses(self):
        for status in (0, 100, 101, 199, 400, 401, 403, 404, 499, 500, 503, 599):
            with self.assertRaises(jenkinsfacade.RequestFailed) as context_manager:
                validate_response(build_response(status), 'Error doing things')
            self.assertEqual(str(context_manager.exception), 'Error doing things')
            self.assertEqual(context_manager.exception.status_code, status)

    def test_request_failed_is_jenkins_exception(self):
        with self.assertRaises(jenkinsfacade.JenkinsException):
            validate_response(build_response(500), 'boom')
