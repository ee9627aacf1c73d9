SERVICE_FIELDS = """
      id
      title
      serviceFields {
        price
        duration
        description
        featured
      }
"""

ARTIST_FIELDS = """
      id
      title
      teammemberfields {
        role
        bio
        specialtiesSeparatedByCommas
        experience
        calendarId
        profilePicture {
          node {
            sourceUrl
          }
        }
      }
"""

GET_SERVICES = f"""
query {{
  services {{
    nodes {{{SERVICE_FIELDS}    }}
  }}
}}
"""

GET_SERVICE_BY_ID = f"""
query($id: ID!) {{
  service(id: $id) {{{SERVICE_FIELDS}  }}
}}
"""

GET_ARTISTS = f"""
query {{
  teamMembers {{
    nodes {{{ARTIST_FIELDS}    }}
  }}
}}
"""

GET_ARTIST_BY_ID = f"""
query($id: ID!) {{
  teamMember(id: $id) {{{ARTIST_FIELDS}  }}
}}
"""
