'''
this script checks all python scripts in src directory
it runs every script, detects pass/failure based on return code, and report that
'''

import os
import sys
import glob
import subprocess


def test_all():
    all_fpaths = glob.glob(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src/*.py'))
    all_fpaths.sort()
    assert len(all_fpaths)

    failed = []
    for fpath in all_fpaths:
        completed = subprocess.run(
            [sys.executable, fpath], stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        retcode = completed.returncode
        status = 'PASSED' if retcode == 0 else 'FAILED (%d)' % retcode
        bname = os.path.basename(fpath)
        print('%s: %s' % (bname, status))
        if retcode != 0:
            failed.append(bname)
    assert len(failed) == 0, 'failed: %s' % ', '.join(failed)


if __name__ == '__main__':
    test_all()
