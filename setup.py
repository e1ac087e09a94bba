from setuptools import setup
import io


with io.open('README.md', encoding='utf-8') as f:
    long_description = f.read()

with io.open('requirements.txt', 'r') as f:
    requirements = [l.strip() for l in f if l.strip()]

setup(name='lspsd-testing',
      version='0.1.5',
      description='Library to facilitate writing tests against lspsd daemons',
      long_description=long_description,
      long_description_content_type='text/markdown',
      url='http://github.com/johncantrell97/lspsd',
      install_requires=requirements,
      extras_require={
          'test': ['flask>=2.0', 'cheroot>=8.6'],
      },
      license='MIT',
      packages=['lspsd.testing'],
      python_requires='>=3.8',
      zip_safe=True)
