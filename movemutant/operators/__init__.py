"""Mutation operators together with the location and expression model they work on."""