from setuptools import setup
import os

PROJECT_ROOT, _ = os.path.split(__file__)
PROJECT_AUTHORS = 'Ken Conley'
PROJECT_EMAILS = ['kwc@willowgarage.com']
REVISION = '0.2.0'
PROJECT_NAME = 'python-jenkins-facade'
PROJECT_URL = 'https://github.com/openstack/python-jenkins'
SHORT_DESCRIPTION = (
  'Python Jenkins facade is a typed client for the Jenkins REST API: jobs, builds, views, computers, '
  'executors and the build queue, with anti-CSRF crumb handling and a pluggable HTTP transport.'
)

try:
    DESCRIPTION = open(os.path.join(PROJECT_ROOT, 'README.rst')).read()
except IOError:
    DESCRIPTION = SHORT_DESCRIPTION


def read_requirements(name):
    with open(os.path.join(PROJECT_ROOT, name)) as f:
        return [line.strip() for line in f
                if line.strip() and not line.startswith('#')]


setup(
    name=PROJECT_NAME.lower(),
    version=REVISION,
    author=PROJECT_AUTHORS,
    author_email=PROJECT_EMAILS,
    packages=[
        'jenkinsfacade'],
    zip_safe=True,
    include_package_data=False,
    install_requires=read_requirements('requirements.txt'),
    extras_require={
        'test': read_requirements('test-requirements.txt'),
    },
    url=PROJECT_URL,
    description=SHORT_DESCRIPTION,
    long_description=DESCRIPTION,
    license='BSD',
    classifiers=[
        'Topic :: Utilities',
        'Intended Audience :: Developers',
        'Intended Audience :: Information Technology',
        'Intended Audience :: System Administrators',
        'Environment :: Console',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
