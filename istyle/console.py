# Copyright 2024, m3shware
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

""" Console output.

Status messages go to standard output. Warnings are printed white on red
and only when :data:`verbose` is set.
"""

CBOLD = '\33[1m'                    # bold text, white on black
CWHITERED = '\33[41m'               # white on red background
CEND = '\33[0m'

verbose = False
""" Print warnings about ignored events and unknown callback ids. """


def message(text, *, bold=False, end='\n'):
    """ Print a status message.
    """
    if bold:
        print(f'{CBOLD}{text}{CEND}', end=end)
    else:
        print(text, end=end)


def warning(text):
    """ Print a warning if :data:`verbose` output is enabled.
    """
    if verbose:
        print(f'{CWHITERED}{text}{CEND}')
