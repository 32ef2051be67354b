"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='tagalong',
	version='0.1.0',
	packages=['tagalong'],
	entry_points={
		'console_scripts': ["tagalong = tagalong.cmdline:main"],
	},
	license='MIT',
	description='S3-style generic functions: methods chosen by a class label nobody checks',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.12",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Education",
		"Topic :: Education",
		"Environment :: Console",
	],
	python_requires='>=3.11',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
	extras_require={
		"test": ["pytest"],
	},
)
