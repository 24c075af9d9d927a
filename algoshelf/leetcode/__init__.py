"""Solutions to well-known array, string, numeric, list, tree and graph problems."""