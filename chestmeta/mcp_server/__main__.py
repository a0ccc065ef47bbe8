from chestmeta.mcp_server import main

main()
