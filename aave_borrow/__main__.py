from aave_borrow.cli import main

main()
