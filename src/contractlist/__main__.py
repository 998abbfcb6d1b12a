from contractlist.cli import main

main()
