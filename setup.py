"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='calc-lib',
	version='0.3.0',
	packages=['calc_lib'],
	entry_points={
		'console_scripts': ["calc = calc_lib.cmdline:main"],
	},
	license='MIT',
	description='Evaluate algebraic expressions given as text, with integer/float promotion, variables, and functions',
	long_description=open('README.md', encoding='utf-8').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Scientific/Engineering :: Mathematics",
		"Topic :: Software Development :: Libraries",
		"Environment :: Console",
	],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
)
