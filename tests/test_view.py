import jenkinsfacade
from tests.base import JenkinsTestBase
from tests.helper import build_response


class JenkinsViewTestBase(JenkinsTestBase):

    view_info = {
        u'name': u'Test View',
        u'description': u'Some jobs',
        u'url': u'http://example.com/view/Test%20View/',
        u'jobs': [
            {u'name': u'job1', u'color': u'blue'},
            {u'name': u'job2', u'color': u'yellow_anime'},
        ],
    }


class JenkinsGetViewTest(JenkinsViewTestBase):

    def test_simple(self):
        self.send.return_value = build_response(200, self.view_info)

        view = self.j.get_view(u'Test View')

        self.assertIsInstance(view, jenkinsfacade.View)
        self.assertEqual(view.name, u'Test View')
        self.assertEqual(view.description, u'Some jobs')
        self.assertEqual(view.job_names, [u'job1', u'job2'])
        self.assertEqual(self.got_request_urls(),
                         [self.make_url('view/Test%20View/api/json')])

    def test_failed(self):
        self.send.return_value = build_response(404, text='Not Found')

        with self.assertRaises(jenkinsfacade.RequestFailed) as context_manager:
            self.j.get_view(u'Test View')
        self.assertEqual(
            str(context_manager.exception),
            'Error during getting information for view Test View on {0}/'
            .format(self.base_url))

    def test_malformed(self):
        self.send.return_value = build_response(200, text='[]')

        with self.assertRaises(jenkinsfacade.MalformedResponse):
            self.j.get_view(u'Test View')

    def test_color(self):
        def view(*colors):
            jobs = [{u'name': u'job%d' % i, u'color': color}
                    for i, color in enumerate(colors)]
            return jenkinsfacade.View({u'jobs': jobs}, self.j)

        self.assertEqual(view(u'blue', u'yellow_anime').get_color(), 'yellow')
        self.assertEqual(view(u'yellow', u'red', u'blue').get_color(), 'red')
        self.assertEqual(view(u'blue', u'notbuilt').get_color(), 'blue')
        self.assertEqual(view().get_color(), 'blue')

    def test_get_jobs(self):
        self.send.side_effect = [
            build_response(200, self.view_info),
            build_response(200, {u'name': u'job1'}),
            build_response(404, text='Not Found'),
        ]

        jobs = self.j.get_view(u'Test View').get_jobs()

        self.assertEqual([job.name for job in jobs], [u'job1'])


class JenkinsGetViewsTest(JenkinsViewTestBase):

    def test_simple(self):
        self.send.side_effect = [
            build_response(200, {u'views': [{u'name': u'All'},
                                            {u'name': u'Test View'}]}),
            build_response(200, {u'name': u'All', u'jobs': []}),
            build_response(200, self.view_info),
        ]

        views = self.j.get_views()

        self.assertEqual([view.name for view in views], [u'All', u'Test View'])
        self.assertEqual(self.got_request_urls(), [
            self.make_url('api/json'),
            self.make_url('view/All/api/json'),
            self.make_url('view/Test%20View/api/json'),
        ])

    def test_primary_view(self):
        self.send.side_effect = [
            build_response(200, {u'views': [], u'primaryView': {u'name': u'All'}}),
            build_response(200, {u'name': u'All', u'jobs': []}),
        ]

        self.assertEqual(self.j.get_primary_view().name, u'All')

    def test_no_primary_view(self):
        self.send.return_value = build_response(200, {u'views': []})

        self.assertIsNone(self.j.get_primary_view())
        self.assertEqual(self.send.call_count, 1)

    def test_null_primary_view(self):
        self.send.return_value = build_response(
            200, {u'views': [], u'primaryView': None})

        self.assertIsNone(self.j.get_primary_view())
        self.assertEqual(self.send.call_count, 1)
